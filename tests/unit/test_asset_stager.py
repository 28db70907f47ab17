"""Tests for AssetStager — freshness by mtime, incremental copies."""

from __future__ import annotations

from pathlib import Path

import pytest

from jnlpforge.core.asset_stager import AssetStager
from jnlpforge.core.errors import BuildIOError
from jnlpforge.models.artifacts import Artifact, StagingPair

SECOND = 1_000_000_000


class TestPlan:
    def test_targets_are_output_slash_logical_name(self, make_artifact, output_dir: Path):
        a = make_artifact("a.jar")
        b = make_artifact("b-1.0.jar")
        pairs = AssetStager(output_dir).plan([a, b])
        assert pairs == [
            StagingPair(source=a.source_path, target=output_dir / "a.jar"),
            StagingPair(source=b.source_path, target=output_dir / "b-1.0.jar"),
        ]

    def test_logical_name_may_differ_from_source_name(self, make_jar, output_dir: Path):
        path = make_jar("scala-library-2.13.12.jar")
        artifact = Artifact(source_path=path, logical_name="scala-library.jar", byte_size=1)
        (pair,) = AssetStager(output_dir).plan([artifact])
        assert pair.target == output_dir / "scala-library.jar"


class TestFreshness:
    def test_missing_target_is_stale(self, make_artifact, output_dir: Path):
        (pair,) = AssetStager(output_dir).plan([make_artifact("a.jar")])
        assert AssetStager.is_stale(pair) is True

    def test_newer_source_is_stale(self, make_artifact, output_dir: Path, touch):
        artifact = make_artifact("a.jar")
        (pair,) = AssetStager(output_dir).plan([artifact])
        output_dir.mkdir()
        pair.target.write_bytes(b"old")
        touch(pair.target, artifact.source_path.stat().st_mtime_ns - SECOND)
        assert AssetStager.is_stale(pair) is True

    def test_equal_mtime_is_not_stale(self, make_artifact, output_dir: Path, touch):
        artifact = make_artifact("a.jar")
        (pair,) = AssetStager(output_dir).plan([artifact])
        output_dir.mkdir()
        pair.target.write_bytes(b"same")
        touch(pair.target, artifact.source_path.stat().st_mtime_ns)
        assert AssetStager.is_stale(pair) is False

    def test_older_source_is_not_stale(self, make_artifact, output_dir: Path, touch):
        artifact = make_artifact("a.jar")
        (pair,) = AssetStager(output_dir).plan([artifact])
        output_dir.mkdir()
        pair.target.write_bytes(b"signed copy")
        touch(pair.target, artifact.source_path.stat().st_mtime_ns + SECOND)
        assert AssetStager.is_stale(pair) is False

    def test_missing_source_raises_io_error(self, output_dir: Path, tmp_dir: Path):
        pair = StagingPair(source=tmp_dir / "gone.jar", target=output_dir / "gone.jar")
        with pytest.raises(BuildIOError, match="stat failed"):
            AssetStager.is_stale(pair)


class TestStage:
    def test_first_stage_copies_everything(self, make_artifact, output_dir: Path):
        artifacts = [make_artifact("a.jar"), make_artifact("b.jar")]
        fresh = AssetStager(output_dir).stage(artifacts)
        assert fresh == [output_dir / "a.jar", output_dir / "b.jar"]
        assert (output_dir / "a.jar").read_bytes() == b"jar:a.jar"

    def test_copy_preserves_source_mtime(self, make_artifact, output_dir: Path):
        artifact = make_artifact("a.jar")
        AssetStager(output_dir).stage([artifact])
        assert (
            (output_dir / "a.jar").stat().st_mtime_ns
            == artifact.source_path.stat().st_mtime_ns
        )

    def test_second_stage_copies_nothing(self, make_artifact, output_dir: Path):
        artifacts = [make_artifact("a.jar"), make_artifact("b.jar")]
        stager = AssetStager(output_dir)
        stager.stage(artifacts)
        assert stager.stage(artifacts) == []

    def test_only_touched_source_is_recopied(self, make_artifact, output_dir: Path, touch):
        a = make_artifact("a.jar")
        b = make_artifact("b.jar")
        stager = AssetStager(output_dir)
        stager.stage([a, b])

        b.source_path.write_bytes(b"rebuilt")
        touch(b.source_path, b.source_path.stat().st_mtime_ns + 5 * SECOND)

        assert stager.stage([a, b]) == [output_dir / "b.jar"]
        assert (output_dir / "b.jar").read_bytes() == b"rebuilt"

    def test_no_artifacts_stages_nothing(self, output_dir: Path):
        assert AssetStager(output_dir).stage([]) == []
