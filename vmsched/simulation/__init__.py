"""仿真引擎层"""

from .request import SimulationRequest
from .simulator import SimulationResult, Simulator, run_simulation

__all__ = ["SimulationRequest", "SimulationResult", "Simulator", "run_simulation"]
