from ngphone.api.main import app  # noqa: F401
