"""Patch service: edit the Cloned Tree in place.

Two independent patches:
- Depth Patch: rewrite the `instantiationDepth === N` limit in checker.ts.
- Descriptor Patch: rename the package and/or make it publicly publishable.

The text transformations are pure functions (`patch_type_depth`,
`patch_package_descriptor`, `dump_package_descriptor`); the service only
adds file I/O and progress output around them.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from tspatcher.core.config import DEFAULT_TYPE_DEPTH
from tspatcher.core.result import Err, Ok, Result
from tspatcher.core.structured import StrDict, as_str_dict, get_table
from tspatcher.output.console import Style
from tspatcher.platform.files import atomic_write_text

from .base import BaseService
from .errors import DescriptorInvalid, PatchError, PatchIOFailed, PatchTargetMissing

__all__ = [
    "DescriptorChanges",
    "PatchService",
    "dump_package_descriptor",
    "patch_package_descriptor",
    "patch_type_depth",
]

# Look-behind instead of \b: `myinstantiationDepth` must not match.
_DEPTH_PATTERN = re.compile(r"(?<!\w)instantiationDepth ===\s+\d+", re.ASCII)


@dataclass(frozen=True, slots=True)
class DescriptorChanges:
    """Requested package.json edits. Fields left at their default are not touched."""

    name: str | None = None
    make_public: bool = False

    @property
    def is_empty(self) -> bool:
        return self.name is None and not self.make_public


def patch_type_depth(source: str, depth: int) -> tuple[str, int]:
    """Set every instantiation depth limit in source to depth.

    Returns:
        (patched source, number of occurrences replaced)
    """
    return _DEPTH_PATTERN.subn(f"instantiationDepth === {depth}", source)


def patch_package_descriptor(data: StrDict, changes: DescriptorChanges) -> StrDict:
    """Return a copy of data with changes applied.

    Key order is kept: an existing `name` stays where it is, a new
    `publishConfig` is appended. Sibling keys of `publishConfig` survive.
    """
    out = dict(data)
    if changes.name is not None:
        out["name"] = changes.name
    if changes.make_public:
        publish_config = dict(get_table(out, "publishConfig") or {})
        publish_config["access"] = "public"
        out["publishConfig"] = publish_config
    return out


def dump_package_descriptor(data: StrDict) -> str:
    """Serialize the way npm tooling expects: 4-space indent, one trailing newline."""
    return json.dumps(data, indent=4, ensure_ascii=False) + "\n"


class PatchService(BaseService):
    """Apply the Depth and Descriptor patches to the Cloned Tree."""

    def patch_depth(self, depth: int = DEFAULT_TYPE_DEPTH) -> Result[int, PatchError]:
        """Rewrite checker.ts with the new depth limit.

        The file is rewritten even when nothing changes.

        Returns:
            Ok(number of occurrences replaced) or Err(PatchError)
        """
        path = self._workspace.checker_path
        if not path.is_file():
            return Err(PatchTargetMissing(path=path))

        self._console.print(f"Changing maximum instantiation depth to: {depth}")

        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                source = handle.read()
        except UnicodeDecodeError as e:
            return Err(PatchIOFailed(path=path, reason=f"not valid UTF-8 ({e.reason})"))
        except OSError as e:
            return Err(PatchIOFailed(path=path, reason=str(e)))

        patched, count = patch_type_depth(source, depth)
        try:
            atomic_write_text(path, patched)
        except OSError as e:
            return Err(PatchIOFailed(path=path, reason=str(e)))

        if count == 0:
            self._console.warning(f"no instantiationDepth limit found in {path}")
        else:
            self._console.print(f"{count} occurrence(s) updated in {path.name}", Style.DIM)
        return Ok(count)

    def patch_descriptor(self, changes: DescriptorChanges) -> Result[StrDict, PatchError]:
        """Apply changes to package.json and write it back.

        Returns:
            Ok(new descriptor) or Err(PatchError)
        """
        path = self._workspace.package_json_path
        if not path.is_file():
            return Err(PatchTargetMissing(path=path))

        if changes.name is not None:
            self._console.print(f"Changing package name to: {changes.name}")
        if changes.make_public:
            self._console.print("Making package public.")

        try:
            raw: object = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(DescriptorInvalid(path=path, reason=str(e)))
        except OSError as e:
            return Err(PatchIOFailed(path=path, reason=str(e)))

        data = as_str_dict(raw)
        if data is None:
            return Err(DescriptorInvalid(path=path, reason="expected a JSON object"))

        patched = patch_package_descriptor(data, changes)
        try:
            atomic_write_text(path, dump_package_descriptor(patched))
        except OSError as e:
            return Err(PatchIOFailed(path=path, reason=str(e)))
        return Ok(patched)
