import logging
from importlib.resources import files
from pathlib import Path

logger = logging.getLogger("parsefullname")

DATA_PATH = Path(str(files("parsefullname") / "data"))
