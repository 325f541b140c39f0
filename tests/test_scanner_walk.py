"""디렉터리 스캐너 동작을 검증합니다./Validate directory scanner behaviour."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from scanner import (
    FilterSpec,
    InvalidPatternError,
    Pattern,
    ScanRequest,
    display_path,
    exclude,
    scan,
)
from tests.fixtures.virtual_fs import VirtualFileSystem, bulk_create_files, create_virtual_tree


@pytest.fixture()
def project_fs() -> VirtualFileSystem:
    """순서가 고정된 가상 프로젝트 트리./Virtual project tree with fixed order."""

    return VirtualFileSystem(
        files=[
            "/p/a.lua",
            "/p/b.txt",
            "/p/.hg/store/data",
            "/p/src/main.lua",
            "/p/src/deep/deeper/leaf.lua",
        ]
    )


def _request(*roots: str, max_depth: int = 4, max_results: int = 1000) -> ScanRequest:
    return ScanRequest(roots=roots, max_depth=max_depth, max_results=max_results)


def test_walk_preserves_listing_order(project_fs: VirtualFileSystem) -> None:
    """목록 순서와 깊이 우선 순서를 지킵니다./Listing order and depth-first order are kept."""

    result = scan(_request("/p"), fs=project_fs)
    assert result.files == (
        "/p/a.lua",
        "/p/b.txt",
        "/p/.hg/store/data",
        "/p/src/main.lua",
        "/p/src/deep/deeper/leaf.lua",
    )
    assert result.truncated is False


def test_plain_pattern_excludes_matches(project_fs: VirtualFileSystem) -> None:
    """일반 패턴은 일치 항목을 제외합니다./A plain pattern drops matching files."""

    request = ScanRequest(roots=("/p",), filter=FilterSpec.from_value(r"\.lua$"))
    result = scan(request, fs=project_fs)
    assert "/p/a.lua" not in result.files
    assert "/p/b.txt" in result.files
    assert all(not path.endswith(".lua") for path in result.files)


def test_negated_pattern_keeps_only_matches(project_fs: VirtualFileSystem) -> None:
    """반전 패턴은 일치하지 않는 항목을 제외합니다./A negated pattern keeps only matches."""

    request = ScanRequest(roots=("/p",), filter=FilterSpec.from_value(r"!\.lua$"), max_depth=4)
    result = scan(request, fs=project_fs)
    assert "/p/a.lua" in result.files
    assert "/p/b.txt" not in result.files
    assert all(path.endswith(".lua") for path in result.files)


def test_folder_pattern_prunes_only_that_folder(project_fs: VirtualFileSystem) -> None:
    """폴더 패턴은 해당 폴더만 건너뜁니다./Folder patterns prune only the matching folder."""

    request = ScanRequest(roots=("/p",), filter=FilterSpec.from_value({"folders": [r"\.hg"]}))
    result = scan(request, fs=project_fs)
    assert "/p/.hg/store/data" not in result.files
    assert "/p/src/main.lua" in result.files
    assert "/p/.hg" not in project_fs.listed


def test_folder_patterns_do_not_filter_files() -> None:
    """폴더 패턴은 파일 이름에 적용되지 않습니다./Folder patterns never filter files."""

    fs = VirtualFileSystem(files=["/r/notes.hg.txt"])
    request = ScanRequest(roots=("/r",), filter=FilterSpec.from_value({"folders": [r"\.hg"]}))
    assert scan(request, fs=fs).files == ("/r/notes.hg.txt",)


def test_depth_limit_stops_recursion(project_fs: VirtualFileSystem) -> None:
    """최대 깊이 이상으로 내려가지 않습니다./Never descend at depth >= max_depth."""

    result = scan(_request("/p", max_depth=2), fs=project_fs)
    assert "/p/src/main.lua" in result.files
    assert "/p/src/deep/deeper/leaf.lua" not in result.files
    assert "/p/src/deep" not in project_fs.listed


def test_depth_one_lists_only_root_files(project_fs: VirtualFileSystem) -> None:
    """깊이 1은 루트 파일만 나열합니다./Depth one lists the root's own files."""

    result = scan(_request("/p", max_depth=1), fs=project_fs)
    assert result.files == ("/p/a.lua", "/p/b.txt")
    assert project_fs.listed == ["/p"]


def test_depth_zero_still_lists_root(project_fs: VirtualFileSystem) -> None:
    """깊이 0도 루트 자체는 나열합니다./Depth zero still lists the root itself."""

    result = scan(_request("/p", max_depth=0), fs=project_fs)
    assert result.files == ("/p/a.lua", "/p/b.txt")


def test_roots_are_scanned_in_given_order() -> None:
    """루트 순서를 유지합니다./Results follow root order."""

    fs = VirtualFileSystem(files=["/p/b/f1", "/p/a/f1"])
    result = scan(_request("/p/a", "/p/b"), fs=fs)
    assert result.files == ("/p/a/f1", "/p/b/f1")
    reversed_result = scan(_request("/p/b", "/p/a"), fs=fs)
    assert reversed_result.files == ("/p/b/f1", "/p/a/f1")


def test_max_results_truncates_across_roots() -> None:
    """최대 개수에 도달하면 전체 스캔을 멈춥니다./Hitting the cap stops the whole scan."""

    fs = VirtualFileSystem(files=["/a/1", "/a/2", "/b/3", "/c/4"])
    result = scan(_request("/a", "/b", "/c", max_results=2), fs=fs)
    assert result.files == ("/a/1", "/a/2")
    assert result.truncated is True
    assert "/c" not in fs.listed


def test_exact_match_count_is_not_truncated() -> None:
    """정확히 최대 개수면 잘림이 아닙니다./Exactly max_results matches is not truncation."""

    fs = VirtualFileSystem(files=["/a/1", "/a/2", "/a/skip.md"])
    request = ScanRequest(
        roots=("/a",), filter=FilterSpec.from_value(r"\.md$"), max_results=2
    )
    result = scan(request, fs=fs)
    assert result.files == ("/a/1", "/a/2")
    assert result.truncated is False


def test_unlistable_directory_counts_as_empty(project_fs: VirtualFileSystem) -> None:
    """읽을 수 없는 디렉터리는 비어 있는 것으로 봅니다./Unlistable folders count as empty."""

    project_fs.unlistable.add("/p/src")
    result = scan(_request("/p"), fs=project_fs)
    assert "/p/src/main.lua" not in result.files
    assert "/p/b.txt" in result.files
    assert [error.path for error in result.errors] == ["/p/src"]
    assert result.to_payload()["errors"]


def test_missing_root_is_reported_not_raised() -> None:
    """없는 루트는 오류로 기록만 합니다./A missing root is recorded, not raised."""

    fs = VirtualFileSystem(files=["/real/x"])
    result = scan(_request("/missing", "/real"), fs=fs)
    assert result.files == ("/real/x",)
    assert result.errors[0].path == "/missing"


def test_unstatable_entries_are_skipped_and_recorded(project_fs: VirtualFileSystem) -> None:
    """메타데이터를 읽지 못한 항목은 건너뛰고 기록합니다./Entries failing stat are skipped and recorded."""

    project_fs.unstatable.update({"/p/b.txt", "/p/src"})
    result = scan(_request("/p"), fs=project_fs)
    assert result.files == ("/p/a.lua", "/p/.hg/store/data")
    assert [error.path for error in result.errors] == ["/p/b.txt", "/p/src"]
    assert "/p/src" not in project_fs.listed
    assert result.truncated is False


def test_local_dangling_symlink_is_recorded(tmp_path: Path) -> None:
    """깨진 심볼릭 링크는 오류로 남습니다./A dangling symlink lands in the errors."""

    (tmp_path / "ok.txt").write_text("ok", encoding="utf-8")
    dangling = tmp_path / "dangling"
    try:
        dangling.symlink_to(tmp_path / "missing-target")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not available")
    result = scan(_request(str(tmp_path)))
    assert result.files == (str(tmp_path / "ok.txt"),)
    assert [error.path for error in result.errors] == [str(dangling)]
    assert result.errors[0].message


def test_dot_prefix_is_stripped() -> None:
    """``./`` 접두사를 제거합니다./The ``./`` prefix is stripped from results."""

    fs = VirtualFileSystem(files=["a.txt", "sub/b.txt"])
    result = scan(_request("."), fs=fs)
    assert result.files == ("a.txt", os.path.join("sub", "b.txt"))
    assert display_path("./x/y") == "x/y"
    assert display_path(".\\x") == "x"
    assert display_path("../x") == "../x"


def test_patterns_are_or_combined() -> None:
    """패턴 중 하나라도 제외하면 제외됩니다./Any single excluding pattern wins."""

    patterns = (Pattern.parse(r"\.txt$"), Pattern.parse(r"!^src/"))
    assert exclude("src/a.txt", patterns) is True
    assert exclude("docs/a.lua", patterns) is True
    assert exclude("src/a.lua", patterns) is False
    assert exclude("anything", ()) is False


def test_pattern_parse_and_str() -> None:
    """``!`` 표식이 반전으로 해석됩니다./The ``!`` marker becomes negation."""

    pattern = Pattern.parse(r"!\.lua$")
    assert pattern.negate is True
    assert pattern.text == r"\.lua$"
    assert str(pattern) == r"!\.lua$"
    assert Pattern.parse("plain") == Pattern(text="plain")


def test_filter_from_value_shapes() -> None:
    """경계 값 형태별로 필터를 만듭니다./Filters build from every boundary shape."""

    assert FilterSpec.from_value(None).is_empty
    single = FilterSpec.from_value("abc")
    assert single.file_patterns == (Pattern("abc"),)
    listed = FilterSpec.from_value(["a", "!b"])
    assert listed.file_patterns == (Pattern("a"), Pattern("b", negate=True))
    mapped = FilterSpec.from_value({"folders": "x"})
    assert mapped.file_patterns == ()
    assert mapped.folder_patterns == (Pattern("x"),)
    assert FilterSpec.from_value(mapped) is mapped
    with pytest.raises(ValueError):
        FilterSpec.from_value({"dirs": ["x"]})
    with pytest.raises(TypeError):
        FilterSpec.from_value(42)


def test_invalid_pattern_is_rejected() -> None:
    """잘못된 정규식은 생성 시 거부됩니다./Malformed regexes are rejected up front."""

    with pytest.raises(InvalidPatternError):
        FilterSpec.from_value("[unclosed")


@pytest.mark.parametrize(("depth", "limit"), [(-1, 10), (1, 0)])
def test_request_validates_limits(depth: int, limit: int) -> None:
    """요청 한계를 검증합니다./Request limits are validated."""

    with pytest.raises(ValueError):
        ScanRequest(roots=("/p",), max_depth=depth, max_results=limit)


def test_request_accepts_single_path(tmp_path: Path) -> None:
    """단일 경로도 루트로 받습니다./A single path is accepted as the root."""

    assert ScanRequest(roots=tmp_path).roots == (str(tmp_path),)  # type: ignore[arg-type]


def test_local_scan_filters_and_depth(tmp_path: Path) -> None:
    """실제 파일 시스템에서 필터/깊이를 확인합니다./Filters and depth on a real tree."""

    create_virtual_tree(
        tmp_path,
        {
            "keep/a.txt": "alpha",
            "keep/b.py": "print('hi')",
            "keep/deep/c.log": "deep",
            ".git/config": "user",
            "note.md": "note",
        },
    )
    request = ScanRequest(
        roots=(str(tmp_path),),
        filter=FilterSpec.from_value({"files": [r"\.md$"], "folders": [r"\.git$"]}),
        max_depth=2,
    )
    result = scan(request)
    found = {Path(path).relative_to(tmp_path).as_posix() for path in result.files}
    assert found == {"keep/a.txt", "keep/b.py"}


def test_local_scan_truncates_large_tree(tmp_path: Path) -> None:
    """대량 트리도 최대 개수에서 멈춥니다./Large trees stop at the cap."""

    list(bulk_create_files(tmp_path, 30))
    result = scan(ScanRequest(roots=(str(tmp_path),), max_results=10))
    assert len(result.files) == 10
    assert result.truncated is True
