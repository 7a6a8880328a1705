from .orchestrator import WalkOrchestrator
from .service import WalkService

__all__ = ['WalkOrchestrator', 'WalkService']
