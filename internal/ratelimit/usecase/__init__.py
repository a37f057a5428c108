from .new import New
from .usecase import SubmissionGate

__all__ = ["New", "SubmissionGate"]
