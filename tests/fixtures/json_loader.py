import copy
import json
from pathlib import Path
from typing import Any, Dict

DATA_FILE = Path(__file__).parent / "test_data.json"


class TestDataLoader:
    """Accounts and center affiliations shared by the test suites (test_data.json)"""

    __test__ = False

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            cls._data = json.loads(DATA_FILE.read_text())
        return cls._data

    @classmethod
    def get_copy(cls, key: str) -> Any:
        """Deep copy, so tests can mutate the payload freely"""
        return copy.deepcopy(cls.load()[key])

    @classmethod
    def credentials(cls, key: str) -> Dict[str, str]:
        """Login payload (email and password) of an account"""
        account = cls.load()[key]
        return {"email": account["email"], "password": account["password"]}
