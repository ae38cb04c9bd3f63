"""Tests for bounded directory discovery."""

from unittest.mock import patch

from storage_audit.finder import find_matching_directories


def make_dirs(root, *relatives):
    for relative in relatives:
        (root / relative).mkdir(parents=True, exist_ok=True)


class TestFindMatchingDirectories:
    def test_finds_matching_directory(self, tmp_path):
        node_modules = tmp_path / "project" / "node_modules"
        node_modules.mkdir(parents=True)
        (node_modules / "package.json").write_text("{}")

        results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert results == [node_modules]

    def test_finds_multiple_projects(self, tmp_path):
        make_dirs(tmp_path, "p1/node_modules", "p2/node_modules", "p3/node_modules")

        results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert len(results) == 3

    def test_traversal_order_is_deterministic(self, tmp_path):
        make_dirs(tmp_path, "b/build", "a/build", "c/build")

        first = list(find_matching_directories(tmp_path, {"build"}, max_depth=5))
        second = list(find_matching_directories(tmp_path, {"build"}, max_depth=5))
        assert first == second
        assert [p.parent.name for p in first] == ["a", "b", "c"]

    def test_multiple_names(self, tmp_path):
        make_dirs(tmp_path, "rust/target", "web/dist", "web/src")

        results = list(find_matching_directories(tmp_path, {"target", "dist"}, max_depth=5))
        assert {p.name for p in results} == {"target", "dist"}

    def test_does_not_descend_into_match(self, tmp_path):
        outer = tmp_path / "project" / "node_modules"
        make_dirs(tmp_path, "project/node_modules/pkg/node_modules")

        results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert results == [outer]

    def test_files_are_not_matched(self, tmp_path):
        (tmp_path / "build").write_text("not a directory")

        assert list(find_matching_directories(tmp_path, {"build"}, max_depth=5)) == []

    def test_respects_max_depth(self, tmp_path):
        make_dirs(tmp_path, "l1/l2/l3/l4/l5/node_modules", "l1/l2/l3/l4/l5/l6/node_modules")

        # level 6 node_modules is found, level 7 is not
        results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert results == [tmp_path / "l1/l2/l3/l4/l5/node_modules"]

        assert list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=5)) == []

    def test_skips_hidden_segments(self, tmp_path):
        make_dirs(tmp_path, ".cache/project/node_modules", "visible/node_modules")

        results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert results == [tmp_path / "visible" / "node_modules"]

    def test_hidden_names_never_match(self, tmp_path):
        make_dirs(tmp_path, "web/.next")

        assert list(find_matching_directories(tmp_path, {".next"}, max_depth=5)) == []

    def test_extra_exclusions(self, tmp_path):
        make_dirs(
            tmp_path,
            "app/node_modules/lib/build",
            "Library/Caches/build",
            "app/build",
        )

        results = list(
            find_matching_directories(
                tmp_path,
                {"build"},
                max_depth=5,
                exclude=["/node_modules/", "/Library/"],
            )
        )
        assert results == [tmp_path / "app" / "build"]

    def test_exclusions_relative_to_root(self, tmp_path):
        root = tmp_path / "Library" / "home"
        make_dirs(root, "proj/build")

        results = list(find_matching_directories(root, {"build"}, max_depth=5, exclude=["/Library/"]))
        assert results == [root / "proj" / "build"]

    def test_does_not_follow_symlinks(self, tmp_path):
        make_dirs(tmp_path, "real/node_modules")
        (tmp_path / "alias").symlink_to(tmp_path / "real", target_is_directory=True)

        results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert results == [tmp_path / "real" / "node_modules"]

    def test_missing_root(self, tmp_path):
        assert list(find_matching_directories(tmp_path / "missing", {"build"}, max_depth=5)) == []

    def test_handles_permission_error(self, tmp_path):
        make_dirs(tmp_path, "project/node_modules")

        with patch("storage_audit.finder.os.scandir", side_effect=PermissionError("denied")):
            results = list(find_matching_directories(tmp_path, {"node_modules"}, max_depth=6))
        assert results == []

    def test_is_lazy(self, tmp_path):
        make_dirs(tmp_path, "a/build", "b/build")

        found = find_matching_directories(tmp_path, {"build"}, max_depth=5)
        assert next(found) == tmp_path / "a" / "build"
