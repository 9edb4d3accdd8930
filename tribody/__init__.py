"""Three-body gravity toy: physics, camera and run bookkeeping."""
from .config import SimConfig, load_config
from .data_models import Body
from .simulation import RunEnded, Simulation

__all__ = ["Body", "RunEnded", "SimConfig", "Simulation", "load_config"]
__version__ = "0.1.0"
