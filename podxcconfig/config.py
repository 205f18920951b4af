# Install options shared by every pod target of an installation.
DEFAULT_PODS_ROOT = "${SRCROOT}"


class Config:
    def __init__(
        self,
        pods_root: str = DEFAULT_PODS_ROOT,
        set_arc_compatibility_flag: bool = False,
        **kwargs
    ):
        self.pods_root = pods_root
        self.set_arc_compatibility_flag = set_arc_compatibility_flag
        self.__dict__.update(kwargs)
