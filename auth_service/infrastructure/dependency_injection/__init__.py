from .container import AuthContainer, build_container

__all__ = ["AuthContainer", "build_container"]
