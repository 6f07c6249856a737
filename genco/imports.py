"""Java import references, either hard-coded routes or files of a Java project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_JAVA_EXTENSION = ".java"
_WILDCARD = "*"


class JavaImportError(ValueError):
    """Raised when a Java import cannot be created or resolved."""


def _split_to_nodes(route: str) -> list[str]:
    return route.split(".")


@dataclass(frozen=True)
class JavaImport:
    """A Java import.

    Either a hard-coded ``raw_route`` such as ``org.test.Service`` with no
    folder, or a ``folder`` inside a Java project together with the
    ``nodes`` naming what is imported within it (empty for a wildcard).
    """

    raw_route: str = ""
    folder: Path | None = None
    nodes: tuple[str, ...] = field(default_factory=tuple)

    def _nodes_within_file(self) -> list[str]:
        if self.folder is not None:
            return list(self.nodes)
        return _split_to_nodes(self.raw_route)

    def _package_nodes(self) -> list[str]:
        if self.folder is None:
            raise JavaImportError("Package nodes expected for a folder import")
        return package_nodes_from_dir(self.folder)

    def is_explicit(self) -> bool:
        """True when the import names a specific type rather than a wildcard."""
        if self.folder is not None:
            return bool(self.nodes)
        nodes = self._nodes_within_file()
        return bool(nodes) and nodes[-1] != _WILDCARD

    def is_wildcard(self) -> bool:
        """True when the import covers a whole package."""
        if self.folder is not None:
            return not self.nodes
        nodes = self._nodes_within_file()
        return bool(nodes) and nodes[-1] == _WILDCARD

    def all_nodes(self) -> list[str]:
        """Return the package nodes followed by the imported nodes."""
        if self.folder is not None:
            return [*self._package_nodes(), *self.nodes]
        return _split_to_nodes(self.raw_route)

    def match_type_id(self, type_id: str) -> bool:
        """True when the last node of the import equals ``type_id``."""
        nodes = self.all_nodes()
        return bool(nodes) and nodes[-1] == type_id

    def last_node(self) -> str:
        """Return the last node of the import."""
        nodes = self.all_nodes()
        if not nodes:
            raise JavaImportError("Last node must exist in java import")
        return nodes[-1]

    def _route(self, package_only: bool) -> str:
        if self.folder is None:
            return self.raw_route
        route = ".".join(self._package_nodes())
        if not package_only:
            if self.nodes:
                route += "." + ".".join(self.nodes)
            else:
                route += ".*"
        return route

    def route(self) -> str:
        """Return the full dotted route, e.g. ``org.test.Service``."""
        return self._route(package_only=False)

    def package_route(self) -> str:
        """Return the dotted package route, e.g. ``org.test``."""
        return self._route(package_only=True)

    def specific_file(self) -> Path:
        """Return the Java file that an explicit folder import refers to."""
        if not self.is_explicit():
            raise JavaImportError(
                f'Java import "{self}" must be explicit to the its specific file.'
            )
        if self.folder is not None and self.nodes:
            return self.folder / f"{self.nodes[0]}{_JAVA_EXTENSION}"
        raise JavaImportError(f'Specific file not found for import "{self}"')

    def __str__(self) -> str:
        text = "import " + ".".join(self.all_nodes())
        if self.folder is not None and not self.nodes:
            text += ".*"
        return text + ";"


def route_import(route: str) -> JavaImport:
    """Create a hard-coded import from a dotted route, without any checks."""
    return JavaImport(raw_route=route)


def explicit_import(route: str) -> JavaImport:
    """Create a hard-coded import that must name a specific type."""
    java_import = route_import(route)
    if not java_import.is_explicit():
        raise JavaImportError(
            f"Invalid attempt to create an explicit java import:\n\t{route!r}"
        )
    return java_import


def import_from_file(file_path: Path | str) -> JavaImport:
    """Create an explicit import referring to a Java file of a Java project."""
    path = Path(file_path)
    if not path.exists():
        raise JavaImportError(
            "Can not create an explicit java import using a file that does not "
            f"exist:\n\t{str(path.absolute())!r}\n"
        )
    if not path.is_file():
        raise JavaImportError(
            "Can not create an explicit java import using non file input:\n\t"
            f"{str(path.absolute())!r}\n"
        )
    if not path.name.endswith(_JAVA_EXTENSION):
        raise JavaImportError(
            "Can not create an explicit java import using non java file:\n\t"
            f"{str(path.absolute())!r}\n"
        )

    folder = path.parent
    if not package_nodes_from_dir(folder):
        raise JavaImportError(
            "Invalid attempt to create an explicit java import using a file not "
            f"associated to a java project:\n{str(path.absolute())!r}"
        )
    name = path.name[: -len(_JAVA_EXTENSION)]
    return JavaImport(folder=folder, nodes=(name,))


def package_nodes_from_dir(dir_path: Path | str) -> list[str]:
    """Return the package nodes of a folder below ``src/main/java``."""
    path = Path(dir_path)
    if not path.is_dir():
        raise JavaImportError(
            f"Java import related to an invalid folder:\n\t\"{path.absolute()}\"\n"
        )

    for ancestor in (path, *path.parents):
        parent = ancestor.parent
        grandparent = parent.parent
        if (
            ancestor.name == "java"
            and parent != ancestor
            and parent.name == "main"
            and grandparent != parent
            and grandparent.name == "src"
        ):
            return list(path.parts[len(ancestor.parts):])

    raise JavaImportError(
        "Trying to create a java import that does not belong to any java "
        f"project:\n\t\"{path.absolute()}\"\n"
    )