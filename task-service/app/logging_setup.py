import logging,sys
from typing import Union
FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
# call once at startup; replaces any root handlers already installed
def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    logging.captureWarnings(True)
