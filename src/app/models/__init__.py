from .annotation import Annotation
from .model import Model
from .user import User

__all__ = ["Annotation", "Model", "User"]
