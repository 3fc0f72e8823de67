from .fixtures import lathe, machines, march_2024, mill, press  # noqa: F401
