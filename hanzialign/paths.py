import logging
import os
from pathlib import Path

logger = logging.getLogger("hanzialign")

try:
    PACKAGE_ROOT_PATH = os.path.abspath(os.path.join(__file__, os.pardir))
except NameError:
    PACKAGE_ROOT_PATH = os.path.abspath(os.path.join(os.getcwd(), "hanzialign"))

DATA_PATH = Path(PACKAGE_ROOT_PATH) / "data"
SEED_VOCABULARY_FILE = "hsk_seed.csv"
