import hashlib


def h(data, algorithm: str = "sha256") -> str:
    """Reference hex digest computed straight from hashlib."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.new(algorithm, data).hexdigest()


def h2(left: str, right: str, algorithm: str = "sha256") -> str:
    return h(left + right, algorithm)
