import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import hanzialign
sys.path.insert(0, str(Path(__file__).parent.parent))

from hanzialign import PinyinAligner
from hanzialign.services import load_seed_vocabulary


@pytest.fixture(scope="session")
def seed_vocabulary():
    return load_seed_vocabulary()


@pytest.fixture(scope="session")
def aligner(seed_vocabulary):
    """Aligner over the bundled seed vocabulary."""
    return PinyinAligner(vocabulary=seed_vocabulary)


@pytest.fixture(scope="session")
def seed_index(aligner):
    return aligner.index
