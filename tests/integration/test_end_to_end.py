"""Integration tests for the end-to-end fingerprint pipeline.

These tests run the complete parse, extract and hash pipeline over real
package directories.
"""

import hashlib
import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from goexphash import hash_directory, hash_package
from goexphash.models import EntryKind

_SHAPES_ENTRIES = [
    "const KindCircle Kind = iota",
    "const KindSquare",
    "const Pi = math.Pi",
    "func (c *Circle) Area() float64",
    "func (c *Circle) String() string",
    "func (s Square) Area() float64",
    "func Join(a Shape, b Shape) []Shape",
    "func NewCircle(r float64) *Circle",
    "type Circle struct { Radius float64 /* contains filtered or unexported fields */ }",
    "type Kind int",
    "type Shape interface { Area() float64; Perimeter() float64 "
    "/* contains filtered or unexported methods */ }",
    "type Square struct { Side float64 }",
]

_BASE = 'package p\n\nfunc Foo(x int) string { return "" }\n\nconst Bar = 1\n\nfunc baz() {}\n'


def _fingerprint(write_package: Callable, files: dict[str, str], name: str = "pkg") -> str:
    return hash_directory(write_package(files, name=name)).fingerprint


# ---------------------------------------------------------------------------
# Fixture packages
# ---------------------------------------------------------------------------


@pytest.mark.integration
def test_shapes_package_entries(go_fixtures_dir: Path) -> None:
    """Test the full entry list of a realistic package."""
    result = hash_directory(go_fixtures_dir / "shapes")

    assert result.descriptors == _SHAPES_ENTRIES
    assert result.imports == ["fmt", "math"]
    assert result.packages == ["shapes"]
    assert [f.filename for f in result.files] == ["shapes.go", "square.go"]

    buffer = "".join(f"{e}\n" for e in _SHAPES_ENTRIES).encode("utf-8")
    assert result.fingerprint == hashlib.new("sha512_256", buffer).hexdigest()


@pytest.mark.integration
def test_shapes_package_entry_kinds(go_fixtures_dir: Path) -> None:
    """Test entry kinds of the realistic package."""
    result = hash_directory(go_fixtures_dir / "shapes")
    kinds = {e.text: e.kind for e in result.entries}

    assert kinds["const KindSquare"] is EntryKind.CONST_BLOCK_MEMBER
    assert kinds["const Pi = math.Pi"] is EntryKind.SINGLE_CONST
    assert kinds["type Kind int"] is EntryKind.SINGLE_TYPE
    assert kinds["func Join(a Shape, b Shape) []Shape"] is EntryKind.FUNCTION


@pytest.mark.integration
def test_shapes_package_from_gopath(go_fixtures_dir: Path, tmp_path: Path) -> None:
    """Test workspace lookup reaches the same fingerprint as the directory."""
    target = tmp_path / "src" / "example.com" / "shapes"
    shutil.copytree(go_fixtures_dir / "shapes", target)

    via_gopath = hash_package("example.com/shapes", environ={"GOPATH": str(tmp_path)})
    via_dir = hash_directory(go_fixtures_dir / "shapes")

    assert via_gopath.fingerprint == via_dir.fingerprint


@pytest.mark.integration
def test_multi_package_directory_merges_entries(go_fixtures_dir: Path) -> None:
    """Test declarations of two package names form one sorted set."""
    result = hash_directory(go_fixtures_dir / "multipkg")

    assert result.packages == ["alpha", "beta"]
    assert result.descriptors == ['const B = "b"', "func A() int"]


# ---------------------------------------------------------------------------
# Fingerprint properties
# ---------------------------------------------------------------------------


@pytest.mark.integration
def test_concrete_scenario(write_package: Callable) -> None:
    """Test the reference package reproduces the digest bit for bit."""
    pkg = write_package({"lib.go": _BASE})

    first = hash_directory(pkg)
    second = hash_directory(pkg)

    expected = hashlib.new("sha512_256", b"const Bar = 1\nfunc Foo(x int) string\n").hexdigest()
    assert first.descriptors == ["const Bar = 1", "func Foo(x int) string"]
    assert first.fingerprint == second.fingerprint == expected


@pytest.mark.integration
def test_order_independence(write_package: Callable) -> None:
    """Test splitting and reordering declarations across files."""
    single = _fingerprint(
        write_package,
        {"all.go": "package p\n\nfunc A() {}\n\nfunc B() {}\n\nconst C = 3\n"},
        name="single",
    )
    split = _fingerprint(
        write_package,
        {
            "z.go": "package p\n\nconst C = 3\n",
            "a.go": "package p\n\nfunc B() {}\n\nfunc A() {}\n",
        },
        name="split",
    )

    assert single == split


@pytest.mark.integration
def test_export_sensitivity(write_package: Callable) -> None:
    """Test exported additions change the fingerprint, unexported ones do not."""
    base = _fingerprint(write_package, {"lib.go": _BASE}, name="base")
    exported = _fingerprint(
        write_package, {"lib.go": _BASE + "\nfunc Extra() {}\n"}, name="exported"
    )
    unexported = _fingerprint(
        write_package,
        {"lib.go": _BASE + "\nfunc extra() {}\n\nvar hidden = 1\n\nconst secret = 2\n"},
        name="unexported",
    )

    assert exported != base
    assert unexported == base


@pytest.mark.integration
def test_body_and_comment_changes_are_ignored(write_package: Callable) -> None:
    """Test function bodies and comments do not affect the fingerprint."""
    base = _fingerprint(write_package, {"lib.go": _BASE}, name="base")
    changed = _fingerprint(
        write_package,
        {
            "lib.go": "package p\n\n// Foo does things.\nfunc Foo(x int) string {\n"
            '\tif x > 0 {\n\t\treturn "pos"\n\t}\n\treturn ""\n}\n\n'
            "const Bar = 1 // the bar\n\nfunc baz() { panic(1) }\n"
        },
        name="changed",
    )

    assert changed == base


@pytest.mark.integration
def test_whitespace_insensitivity(write_package: Callable) -> None:
    """Test re-indenting and re-spacing exported declarations."""
    base = _fingerprint(write_package, {"lib.go": _BASE}, name="base")
    reformatted = _fingerprint(
        write_package,
        {
            "lib.go": "package p\n\nfunc   Foo(  x   int )    string {\n"
            '    return ""\n}\n\nconst   Bar   =   1\n\nfunc baz() {}\n'
        },
        name="reformatted",
    )

    assert reformatted == base


@pytest.mark.integration
def test_token_reordering_changes_fingerprint(write_package: Callable) -> None:
    """Test swapping parameters changes the fingerprint."""
    ab = _fingerprint(
        write_package, {"lib.go": "package p\n\nfunc F(a int, b string) {}\n"}, name="ab"
    )
    ba = _fingerprint(
        write_package, {"lib.go": "package p\n\nfunc F(b string, a int) {}\n"}, name="ba"
    )

    assert ab != ba


@pytest.mark.integration
def test_block_and_single_declarations_hash_alike(write_package: Callable) -> None:
    """Test a const block and the equivalent single consts give the same entries."""
    block = hash_directory(
        write_package(
            {"lib.go": "package p\n\nconst (\n\tA = 1\n\n\tB = 2\n\tC = 3\n)\n"}, name="block"
        )
    )
    singles = hash_directory(
        write_package(
            {"lib.go": "package p\n\nconst A = 1\n\nconst B = 2\n\nconst C = 3\n"},
            name="singles",
        )
    )

    assert block.descriptors == ["const A = 1", "const B = 2", "const C = 3"]
    assert block.fingerprint == singles.fingerprint


@pytest.mark.integration
def test_test_files_are_ignored(write_package: Callable) -> None:
    """Test *_test.go files never contribute."""
    base = _fingerprint(write_package, {"lib.go": _BASE}, name="base")
    with_tests = _fingerprint(
        write_package,
        {
            "lib.go": _BASE,
            "lib_test.go": 'package p\n\nimport "testing"\n\nfunc TestFoo(t *testing.T) {}\n',
        },
        name="with_tests",
    )

    assert with_tests == base


@pytest.mark.integration
def test_generic_types_and_methods(write_package: Callable) -> None:
    """Test generic declarations are rendered with their type parameters."""
    result = hash_directory(
        write_package(
            {
                "stack.go": "package p\n\ntype Stack[T any] struct {\n\titems []T\n}\n\n"
                "func (s *Stack[T]) Push(v T) {\n\ts.items = append(s.items, v)\n}\n\n"
                "func New[T any]() *Stack[T] { return &Stack[T]{} }\n"
            }
        )
    )

    assert "func (s *Stack[T]) Push(v T)" in result.descriptors
    assert "func New[T any]() *Stack[T]" in result.descriptors
    assert any(d.startswith("type Stack[T any] struct {") for d in result.descriptors)
