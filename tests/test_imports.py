from pathlib import Path

import pytest

from genco.imports import (
    JavaImport,
    JavaImportError,
    explicit_import,
    import_from_file,
    package_nodes_from_dir,
    route_import,
)


@pytest.fixture
def project_package(tmp_path: Path) -> Path:
    folder = tmp_path / "src" / "main" / "java" / "org" / "test"
    folder.mkdir(parents=True)
    return folder


@pytest.fixture
def java_file(project_package: Path) -> Path:
    path = project_package / "JavaImportClass.java"
    path.write_text("package org.test;\n\npublic class JavaImportClass {}\n")
    return path


def test_new_explicit_import():
    java_import = explicit_import("org.test")

    assert java_import.is_explicit()
    assert not java_import.is_wildcard()
    assert java_import.route() == "org.test"


def test_new_wildcard_import():
    java_import = route_import("org.test.*")

    assert java_import.is_wildcard()
    assert not java_import.is_explicit()
    assert java_import.route() == "org.test.*"


def test_get_last_node():
    java_import = explicit_import("org.test.LastNodeClass")

    assert java_import.is_explicit()
    assert not java_import.is_wildcard()
    assert java_import.route() == "org.test.LastNodeClass"
    assert java_import.last_node() == "LastNodeClass"


def test_to_string_hardcoded_import():
    assert str(explicit_import("org.test.Class")) == "import org.test.Class;"


def test_explicit_import_rejects_wildcard():
    with pytest.raises(JavaImportError):
        explicit_import("org.test.*")


def test_hardcoded_all_nodes():
    assert route_import("org.test.Class").all_nodes() == ["org", "test", "Class"]


def test_new_explicit_import_from_file(java_file: Path):
    java_import = import_from_file(java_file)

    assert java_import.is_explicit()
    assert not java_import.is_wildcard()
    assert java_import.route() == "org.test.JavaImportClass"
    assert java_import.package_route() == "org.test"
    assert str(java_import) == "import org.test.JavaImportClass;"
    assert java_import.match_type_id("JavaImportClass")
    assert not java_import.match_type_id("JavaImportClassFake")


def test_specific_file_of_file_import(java_file: Path):
    assert import_from_file(java_file).specific_file() == java_file


def test_specific_file_of_hardcoded_import_fails():
    with pytest.raises(JavaImportError, match="Specific file not found"):
        explicit_import("org.test.Class").specific_file()


def test_specific_file_of_wildcard_fails():
    with pytest.raises(JavaImportError, match="must be explicit"):
        route_import("org.test.*").specific_file()


def test_folder_wildcard_import(project_package: Path):
    java_import = JavaImport(folder=project_package)

    assert java_import.is_wildcard()
    assert not java_import.is_explicit()
    assert java_import.route() == "org.test.*"
    assert java_import.package_route() == "org.test"
    assert str(java_import) == "import org.test.*;"


def test_import_from_missing_file(project_package: Path):
    with pytest.raises(JavaImportError, match="does not exist"):
        import_from_file(project_package / "Missing.java")


def test_import_from_directory(project_package: Path):
    with pytest.raises(JavaImportError, match="non file input"):
        import_from_file(project_package)


def test_import_from_non_java_file(project_package: Path):
    path = project_package / "notes.txt"
    path.write_text("text")
    with pytest.raises(JavaImportError, match="non java file"):
        import_from_file(path)


def test_import_from_file_at_source_root(tmp_path: Path):
    root = tmp_path / "src" / "main" / "java"
    root.mkdir(parents=True)
    path = root / "RootClass.java"
    path.write_text("class RootClass {}")
    with pytest.raises(JavaImportError, match="not associated to a java project"):
        import_from_file(path)


def test_import_from_file_outside_project(tmp_path: Path):
    path = tmp_path / "Loose.java"
    path.write_text("class Loose {}")
    with pytest.raises(JavaImportError, match="does not belong"):
        import_from_file(path)


def test_package_nodes_from_dir(project_package: Path):
    assert package_nodes_from_dir(project_package) == ["org", "test"]


def test_package_nodes_from_source_root(tmp_path: Path):
    root = tmp_path / "src" / "main" / "java"
    root.mkdir(parents=True)
    assert package_nodes_from_dir(root) == []


def test_package_nodes_from_missing_dir(tmp_path: Path):
    with pytest.raises(JavaImportError, match="invalid folder"):
        package_nodes_from_dir(tmp_path / "absent")


def test_package_nodes_requires_src_main_java(tmp_path: Path):
    folder = tmp_path / "other" / "main" / "java" / "org"
    folder.mkdir(parents=True)
    with pytest.raises(JavaImportError, match="does not belong"):
        package_nodes_from_dir(folder)