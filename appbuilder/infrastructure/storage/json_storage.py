"""Reading and writing the JSON documents of a project.

``package.json`` and ``AppBuilder.json`` are both JSON objects; any read
or write problem comes back as a ``config-load`` error.
"""

import json
from pathlib import Path
from typing import Any

from appbuilder.domain.shared import BuildError, Err, Ok, Result, config_error


class JsonStorage:
    """JSON object files, read and written as UTF-8.

    Example:
        result = JsonStorage().load_json(Path("AppBuilder.json"))
        tasks = result.value["tasks"] if isinstance(result, Ok) else []
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], BuildError]:
        """Read the JSON object stored at ``path``.

        Returns:
            Ok(dict) if successful, Err(BuildError) if the file is missing,
            unreadable, not JSON, or not a JSON object.
        """
        try:
            if not path.exists():
                return Err(config_error(f"File not found: {path}"))

            content = path.read_text(encoding="utf-8")
            data = json.loads(content)
        except json.JSONDecodeError as e:
            return Err(config_error(f"Invalid JSON in {path}: {e}"))
        except UnicodeDecodeError as e:
            return Err(config_error(f"{path} is not UTF-8 text: {e}"))
        except PermissionError:
            return Err(config_error(f"Permission denied reading {path}"))
        except OSError as e:
            return Err(config_error(f"Error reading {path}: {e}"))

        if not isinstance(data, dict):
            return Err(config_error(f"Expected a JSON object in {path}"))
        return Ok(data)

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 4,
    ) -> Result[None, BuildError]:
        """Write ``data`` indented by ``indent`` spaces.

        Key order and non-ASCII text are kept as they are.
        """
        try:
            content = json.dumps(data, indent=indent, ensure_ascii=False)
            path.write_text(content, encoding="utf-8")
            return Ok(None)

        except TypeError as e:
            return Err(config_error(f"Data not JSON serializable: {e}"))
        except PermissionError:
            return Err(config_error(f"Permission denied writing {path}"))
        except OSError as e:
            return Err(config_error(f"Error writing {path}: {e}"))
