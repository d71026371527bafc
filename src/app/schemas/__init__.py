from .annotation import Annotation, InsertAnnotation
from .model import InsertModel, Model
from .user import InsertUser, User, UserRead

__all__ = ["Annotation", "InsertAnnotation", "InsertModel", "Model", "InsertUser", "User", "UserRead"]
