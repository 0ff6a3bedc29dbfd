from typing import Any, Union

# -------- Aliases (clarify intent) --------
UnixSeconds = int
FieldName = str
SeverityLevel = int  # host-supplied sentinel, e.g. ASL or logging levels

# JSON-shaped values produced by machine renderings
JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, list["JSONValue"], dict[str, "JSONValue"]]
JSONObject = dict[str, JSONValue]
JSONArray = list[JSONValue]
TargetRecord = dict[str, Any]
