"""Capability store owning one session parameters document."""

import copy
import json
import logging
from typing import Any, Dict, List, Optional

from webdriver_capabilities.core.exceptions import ConfigurationError, PathError
from webdriver_capabilities.capabilities.paths import (
    MISSING,
    get_path,
    join_path,
    set_path,
    split_path,
)
from webdriver_capabilities.capabilities.views import SessionParameters

logger = logging.getLogger(__name__)

ALWAYS_MATCH_PATH = "capabilities.alwaysMatch"


class CapabilityStore:
    """
    Owner of the session parameters sent when opening a WebDriver session.

    A new store holds the minimal document::

        {
          "capabilities": {
            "alwaysMatch": {},
            "firstMatch": []
          }
        }

    All mutation goes through the setters below, which apply the merge
    policy of each area of the document:

    * ``alwaysMatch`` keys: first write wins unless ``force`` is set, so
      defaults seeded by a browser variant survive later generic calls.
    * root keys and vendor-specific keys: overwritten unless ``force`` is
      cleared.
    * ``firstMatch`` entries: one entry per capability name; ``force``
      replaces the existing entry in place.

    A store is not thread-safe; callers serialize configuration calls.
    """

    def __init__(self, specific_key: Optional[str] = None):
        """
        Initialize a capability store.

        Args:
            specific_key: Name of the vendor options object under
                ``alwaysMatch``, or None if vendor options are unsupported
        """
        if specific_key is not None:
            split_path(specific_key)
        self._specific_key = specific_key
        self._document: Dict[str, Any] = SessionParameters.empty_document()

    @property
    def specific_key(self) -> Optional[str]:
        return self._specific_key

    @property
    def _always_match(self) -> Dict[str, Any]:
        return self._document["capabilities"]["alwaysMatch"]

    @property
    def _first_match(self) -> List[Dict[str, Any]]:
        return self._document["capabilities"]["firstMatch"]

    def set_always_match_key(self, path: str, value: Any, force: bool = False) -> "CapabilityStore":
        """
        Set a capability under ``capabilities.alwaysMatch``.

        Args:
            path: Dotted path, e.g. ``platformName`` or ``timeouts.implicit``
            value: The value to assign
            force: Overwrite a value already present at ``path``

        Example:
            store.set_always_match_key("platformName", "linux")
            store.set_always_match_key("timeouts.implicit", 10000)
        """
        written = set_path(self._always_match, path, copy.deepcopy(value), force=force)
        if not written:
            logger.debug(f"Kept existing alwaysMatch value at '{path}'")
        return self

    def add_first_match(self, name: str, value: Any, force: bool = False) -> "CapabilityStore":
        """
        Add a ``{name: value}`` entry to ``capabilities.firstMatch``.

        If an entry for ``name`` already exists it is kept, unless ``force``
        is set, in which case it is replaced where it stands.

        Example:
            store.add_first_match("browserName", "chrome")
            store.add_first_match("browserName", "firefox")  # ignored
        """
        if len(split_path(name)) != 1:
            raise PathError(name, f"firstMatch entries take a single capability name, got {name!r}")
        entry = {name: copy.deepcopy(value)}

        for index, existing in enumerate(self._first_match):
            if name in existing:
                if force:
                    self._first_match[index] = entry
                else:
                    logger.debug(f"Kept existing firstMatch entry for '{name}'")
                return self

        self._first_match.append(entry)
        return self

    def set_root_key(self, path: str, value: Any, force: bool = True) -> "CapabilityStore":
        """
        Set a key at the root of the session parameters, outside ``capabilities``.

        Example:
            store.set_root_key("login", "blah")
            store.set_root_key("pass", "blah")

        Raises:
            PathError: if ``path`` points into ``capabilities``, which is
                only written through the capability setters
        """
        if split_path(path)[0] == "capabilities":
            raise PathError(
                path,
                f"Cannot set {path!r} as a root key: use set_always_match_key "
                f"or add_first_match for capabilities"
            )
        set_path(self._document, path, copy.deepcopy(value), force=force)
        return self

    def set_specific_key(self, path: str, value: Any, force: bool = True) -> "CapabilityStore":
        """
        Set an option inside the vendor-specific object, i.e.
        ``capabilities.alwaysMatch.<specific_key>.<path>``.

        Raises:
            ConfigurationError: if this store has no specific key
        """
        if not self._specific_key:
            raise ConfigurationError(
                "Vendor-specific options unsupported",
                details=f"set_specific_key('{path}') called on a browser without a specific key",
                recoverable=False,
            )
        full_path = join_path(self._specific_key, path)
        set_path(self._always_match, full_path, copy.deepcopy(value), force=force)
        return self

    def get_always_match_key(self, path: str, default: Any = None) -> Any:
        value = get_path(self._always_match, path)
        return default if value is MISSING else copy.deepcopy(value)

    def get_root_key(self, path: str, default: Any = None) -> Any:
        value = get_path(self._document, path)
        return default if value is MISSING else copy.deepcopy(value)

    def get_specific_key(self, path: str, default: Any = None) -> Any:
        if not self._specific_key:
            return default
        return self.get_always_match_key(join_path(self._specific_key, path), default)

    def has_first_match(self, name: str) -> bool:
        return any(name in entry for entry in self._first_match)

    def get_session_parameters(self) -> Dict[str, Any]:
        """
        Return a snapshot of the session parameters.

        The snapshot is a deep copy: editing it does not change the store.
        """
        return copy.deepcopy(self._document)

    def validate(self) -> SessionParameters:
        """Validate the document shape and return a typed view of it."""
        return SessionParameters.model_validate(self.get_session_parameters())

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the session parameters to JSON."""
        return json.dumps(self._document, indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"CapabilityStore(specific_key={self._specific_key!r})"
