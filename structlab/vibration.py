# structlab/vibration.py
"""
SINGLE-DEGREE-OF-FREEDOM VIBRATION
==================================

Mass-spring-damper under harmonic forcing:

    m·x'' + c·x' + k·x = F0·sin(ωt)

Two views of the same system live here:

1. A time-stepping simulator (``VibrationSimulator``) with stopped/running
   states, advanced by a fixed step Δt using semi-implicit Euler:

       a = (F0·sin(ωt) - k·x - c·v) / m
       v ← v + a·Δt
       x ← x + v·Δt        (uses the *updated* v)
       t ← t + Δt

2. Closed-form steady-state results:

       ωn  = sqrt(k/m)
       ζ   = c / (2·sqrt(k·m))
       r   = ω / ωn
       DAF = 1 / sqrt((1 - r²)² + (2ζr)²)

``Ticker`` is the frame loop: it calls ``tick()`` at a fixed rate, either for
a set number of ticks or against a wall clock, and collects the trajectory.
"""

import dataclasses
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

import numpy as np
import pandas as pd
from loguru import logger

from .config import CONFIG, EngineConfig
from .errors import InvalidRange, require_non_negative, require_positive


class SimStatus(str, Enum):
    STOPPED = 'stopped'
    RUNNING = 'running'


@dataclass(frozen=True)
class OscillatorParams:
    mass: float                     # m (kg)
    stiffness: float                # k (N/m)
    damping: float = 0.0            # c (N·s/m)
    force_amplitude: float = 0.0    # F0 (N)
    forcing_frequency: float = 0.0  # ω (rad/s)


@dataclass(frozen=True)
class OscillatorState:
    time: float
    displacement: float
    velocity: float
    external_force: float = 0.0     # force applied during the step that produced this state


@dataclass
class FrequencyResponse:
    natural_frequency: float
    damping_ratio: float
    ratios: np.ndarray              # r grid
    daf: np.ndarray                 # DAF on the grid
    current_ratio: float
    current_daf: float


def validate_params(params: OscillatorParams) -> OscillatorParams:
    require_positive("mass", params.mass, error=InvalidRange)
    require_positive("stiffness", params.stiffness, error=InvalidRange)
    require_non_negative("damping", params.damping)
    require_non_negative("force_amplitude", params.force_amplitude)
    require_non_negative("forcing_frequency", params.forcing_frequency)
    return params


# ----------------------------------------------------------------------
# Closed form
# ----------------------------------------------------------------------

def natural_frequency(params: OscillatorParams) -> float:
    validate_params(params)
    return float(np.sqrt(params.stiffness / params.mass))


def damping_ratio(params: OscillatorParams) -> float:
    validate_params(params)
    return params.damping / (2.0 * np.sqrt(params.stiffness * params.mass))


def frequency_ratio(params: OscillatorParams) -> float:
    return params.forcing_frequency / natural_frequency(params)


def damped_natural_frequency(params: OscillatorParams) -> float:
    """ωd = ωn·sqrt(1 - ζ²); 0 for critically damped and overdamped systems."""
    zeta = damping_ratio(params)
    if zeta >= 1.0:
        return 0.0
    return natural_frequency(params) * float(np.sqrt(1.0 - zeta ** 2))


def natural_period(params: OscillatorParams) -> float:
    return 2.0 * np.pi / natural_frequency(params)


def static_deflection(params: OscillatorParams) -> float:
    validate_params(params)
    return params.force_amplitude / params.stiffness


def dynamic_amplification(r, zeta):
    """
    DAF(r) = 1 / sqrt((1 - r²)² + (2ζr)²).

    Works on scalars and arrays. Undamped resonance (ζ = 0, r = 1)
    returns +inf.
    """
    r = np.asarray(r, dtype=float)
    denom = np.sqrt((1.0 - r ** 2) ** 2 + (2.0 * zeta * r) ** 2)
    with np.errstate(divide='ignore'):
        out = 1.0 / denom
    if out.ndim == 0:
        return float(out)
    return out


def steady_state_amplitude(params: OscillatorParams) -> float:
    """F0/k · DAF(r); inf at undamped resonance, 0 with no forcing."""
    x_st = static_deflection(params)
    if x_st == 0.0:
        return 0.0
    return x_st * dynamic_amplification(frequency_ratio(params), damping_ratio(params))


def frequency_response(params: OscillatorParams, config: EngineConfig = CONFIG) -> FrequencyResponse:
    """DAF tabulated over r in [0, r_max] at the configured step, plus the current point."""
    zeta = damping_ratio(params)
    n = int(round(config.daf_r_max / config.daf_r_step))
    ratios = np.linspace(0.0, config.daf_r_max, n + 1)
    r = frequency_ratio(params)
    return FrequencyResponse(
        natural_frequency=natural_frequency(params),
        damping_ratio=zeta,
        ratios=ratios,
        daf=dynamic_amplification(ratios, zeta),
        current_ratio=r,
        current_daf=dynamic_amplification(r, zeta),
    )


def mechanical_energy(params: OscillatorParams, state: OscillatorState) -> float:
    """½·m·v² + ½·k·x²"""
    return 0.5 * params.mass * state.velocity ** 2 + 0.5 * params.stiffness * state.displacement ** 2


# ----------------------------------------------------------------------
# Time stepping
# ----------------------------------------------------------------------

def euler_step(state: OscillatorState, params: OscillatorParams, dt: float) -> OscillatorState:
    """One semi-implicit Euler step. Returns a new state."""
    f_ext = params.force_amplitude * np.sin(params.forcing_frequency * state.time)
    a = (f_ext - params.stiffness * state.displacement - params.damping * state.velocity) / params.mass
    v = state.velocity + a * dt
    x = state.displacement + v * dt
    return OscillatorState(
        time=state.time + dt,
        displacement=float(x),
        velocity=float(v),
        external_force=float(f_ext),
    )


class VibrationSimulator:
    """
    Owns one oscillator's state and its stopped/running status.

    The state is an immutable snapshot replaced as a whole on every tick
    and reset. Parameters may be changed at any time; the next tick uses them.
    """

    def __init__(self, params: OscillatorParams, config: EngineConfig = CONFIG):
        self.config = config
        self._params = validate_params(params)
        self._status = SimStatus.STOPPED
        self._state = self._initial_state()
        self.tick_count = 0

    def _initial_state(self) -> OscillatorState:
        return OscillatorState(time=0.0, displacement=self.config.vibration_initial_displacement, velocity=0.0)

    @property
    def dt(self) -> float:
        return self.config.vibration_dt

    @property
    def state(self) -> OscillatorState:
        return self._state

    @property
    def status(self) -> SimStatus:
        return self._status

    @property
    def running(self) -> bool:
        return self._status is SimStatus.RUNNING

    @property
    def params(self) -> OscillatorParams:
        return self._params

    @params.setter
    def params(self, params: OscillatorParams):
        self._params = validate_params(params)

    def update(self, **changes) -> OscillatorParams:
        """Replace individual parameters, e.g. ``sim.update(damping=2.0)``."""
        self.params = dataclasses.replace(self._params, **changes)
        return self._params

    def start(self):
        if self._status is SimStatus.STOPPED:
            logger.info("vibration: start at t={:.3f}", self._state.time)
        self._status = SimStatus.RUNNING

    def pause(self):
        if self._status is SimStatus.RUNNING:
            logger.info("vibration: pause at t={:.3f}", self._state.time)
        self._status = SimStatus.STOPPED

    def reset(self):
        self._status = SimStatus.STOPPED
        self._state = self._initial_state()
        self.tick_count = 0
        logger.info("vibration: reset")

    def tick(self) -> OscillatorState:
        """Advance one step if running; otherwise return the state unchanged."""
        if self._status is SimStatus.RUNNING:
            self._state = euler_step(self._state, self._params, self.dt)
            self.tick_count += 1
        return self._state


class Ticker:
    """
    Fixed-rate driver for a ``VibrationSimulator``.

    Single-threaded: each tick runs to completion, and a pause (from an
    ``on_tick`` callback or elsewhere) is seen before the next one.
    """

    def __init__(self, simulator: VibrationSimulator, interval: Optional[float] = None):
        self.simulator = simulator
        self.interval = simulator.dt if interval is None else require_positive(
            "interval", interval, error=InvalidRange)

    def run(
        self,
        n_ticks: int,
        on_tick: Optional[Callable[[OscillatorState], None]] = None,
    ) -> List[OscillatorState]:
        """Tick up to ``n_ticks`` times, stopping early if the simulator is paused."""
        trajectory = []
        for _ in range(int(n_ticks)):
            if not self.simulator.running:
                break
            state = self.simulator.tick()
            trajectory.append(state)
            if on_tick is not None:
                on_tick(state)
        return trajectory

    def run_for(
        self,
        duration: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Optional[Callable[[OscillatorState], None]] = None,
    ) -> List[OscillatorState]:
        """
        Tick once per ``interval`` of wall-clock time for ``duration`` seconds.

        ``clock`` and ``sleep`` can be replaced (e.g. by a fake clock in tests).
        """
        trajectory = []
        deadline = clock() + duration
        next_at = clock()
        while self.simulator.running:
            now = clock()
            if now >= deadline:
                break
            if now < next_at:
                sleep(min(next_at, deadline) - now)
                continue
            state = self.simulator.tick()
            trajectory.append(state)
            if on_tick is not None:
                on_tick(state)
            next_at += self.interval
        logger.debug("ticker: {} ticks in {:.3f}s", len(trajectory), duration)
        return trajectory


def trajectory_to_dataframe(trajectory: Sequence[OscillatorState]) -> pd.DataFrame:
    """One row per state: time, displacement, velocity, external_force."""
    return pd.DataFrame(
        [dataclasses.asdict(s) for s in trajectory],
        columns=['time', 'displacement', 'velocity', 'external_force'],
    )
