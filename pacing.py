# pacing.py
import simpy
import simpy.rt


class Pacer:
    """
    Decides how the controller waits out a hold between two transitions.

    The controller only ever does ``yield from pacer.hold(env, seconds)``; the
    pacer chooses the simpy environment that gives that timeout its meaning.
    """

    realtime = False

    def create_environment(self) -> simpy.Environment:
        raise NotImplementedError

    def start(self, env: simpy.Environment):
        pass

    def hold(self, env: simpy.Environment, seconds: int):
        yield env.timeout(max(seconds, 0))


class InstantPacer(Pacer):
    """Fast simulation: simulated time jumps forward and a short notice is printed."""

    def create_environment(self):
        return simpy.Environment()

    def hold(self, env, seconds):
        if seconds > 0:
            print(f"   (simulated {seconds}s)")
        yield env.timeout(max(seconds, 0))


class RealtimePacer(Pacer):
    """Every simulated second takes ``factor`` seconds of wall-clock time."""

    realtime = True

    def __init__(self, factor: float = 1.0, strict: bool = False):
        self.factor = factor
        self.strict = strict

    def create_environment(self):
        return simpy.rt.RealtimeEnvironment(factor=self.factor, strict=self.strict)

    def start(self, env):
        # Prompts may have kept the user busy since the environment was made.
        env.sync()


def make_pacer(realtime: bool) -> Pacer:
    return RealtimePacer() if realtime else InstantPacer()
