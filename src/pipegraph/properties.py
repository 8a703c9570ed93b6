from __future__ import annotations

from typing import Any, Dict, Optional

from pipegraph.errors import InvalidPropertiesError


class Properties:
    """
    Key/value property bag shared by nodes and edges.
    """

    _properties: Optional[Dict[Any, Any]] = None

    @property
    def properties(self) -> Dict[Any, Any]:
        """
        The live properties dict (not a copy).
        """
        if self._properties is None:
            self._properties = {}
        return self._properties

    @properties.setter
    def properties(self, new_properties: Optional[Dict[Any, Any]]) -> None:
        if new_properties is not None and not isinstance(new_properties, dict):
            raise InvalidPropertiesError(self, new_properties)

        self._properties = new_properties

    def get(self, key: Any) -> Any:
        return self.properties.get(key)

    def set(self, key: Any, value: Any) -> Any:
        self.properties[key] = value
        return value
