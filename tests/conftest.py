import os, tempfile, pytest
from pathlib import Path
import yaml

# antes de que wordmask.config cree `settings`
os.environ.setdefault("WM_DB_PATH", str(Path(tempfile.mkdtemp(prefix="wm_")) / "wordmask.sqlite"))

FIXTURES = Path(__file__).parent / "fixtures"

def load_yaml(name: str):
    return yaml.safe_load((FIXTURES / name).read_text(encoding="utf-8"))

@pytest.fixture
def scenarios():
    return load_yaml("scenarios.yaml")["cases"]

@pytest.fixture
def store(tmp_path):
    from wordmask.stores.word_store import WordStore
    return WordStore(str(tmp_path / "words.sqlite"))
