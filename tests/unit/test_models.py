"""Tests for artifact, descriptor and differential models."""

from __future__ import annotations

import pytest

from distrosync.models.artifacts import (
    GROUP_MODULE,
    GROUP_WEB,
    TYPE_OMOD,
    TYPE_WAR,
    WEBAPP_ARTIFACT_ID,
    Artifact,
    short_name,
)
from distrosync.models.descriptor import (
    DistroDescriptor,
    DistroProperty,
    ModuleEntry,
    substitute_placeholders,
)
from distrosync.models.differential import ArtifactChange, UpgradeDifferential


class TestArtifact:
    def test_default_dest_file_name(self):
        a = Artifact(artifact_id="appui-omod", version="1.3", type=TYPE_OMOD)
        assert a.dest_file_name == "appui-omod-1.3.omod"

    def test_identity_is_leading_token(self):
        assert Artifact(artifact_id="appui-omod", version="1").identity == "appui"
        assert short_name("htmlformentry") == "htmlformentry"

    def test_platform_detection(self):
        webapp = Artifact(artifact_id=WEBAPP_ARTIFACT_ID, version="2.6.0", group_id=GROUP_WEB, type=TYPE_WAR)
        assert webapp.is_platform is True

    def test_platform_requires_war_type(self):
        jar = Artifact(artifact_id=WEBAPP_ARTIFACT_ID, version="2.6.0", type="jar")
        assert jar.is_platform is False

    def test_with_dest_file_name_copies(self):
        a = Artifact(artifact_id="distro", version="1.0")
        b = a.with_dest_file_name("openmrs-distro.jar")
        assert b.dest_file_name == "openmrs-distro.jar"
        assert a.dest_file_name == "distro-1.0.jar"

    def test_with_version_recomputes_file_name(self):
        a = Artifact(artifact_id="appui-omod", version="1.3", type=TYPE_OMOD)
        assert a.with_version("1.4").dest_file_name == "appui-omod-1.4.omod"

    def test_frozen_and_hashable(self):
        a = Artifact(artifact_id="appui-omod", version="1.3")
        assert {a: 1}[Artifact(artifact_id="appui-omod", version="1.3")] == 1
        with pytest.raises(Exception):
            a.version = "2.0"  # type: ignore[misc]

    def test_coordinate(self):
        a = Artifact(artifact_id="appui-omod", version="1.3")
        assert a.coordinate == f"{GROUP_MODULE}:appui-omod:1.3"


class TestDescriptor:
    def test_for_platform(self):
        d = DistroDescriptor.for_platform("server1", "2.6.0", h2=True)
        assert d.name == "server1"
        assert d.platform_version == "2.6.0"
        assert d.h2_support is True
        assert d.modules == []

    def test_target_artifacts_platform_first(self):
        d = DistroDescriptor(
            name="d",
            version="1",
            platform_version="2.6.0",
            modules=[ModuleEntry(name="appui", version="1.3"), ModuleEntry(name="coreapps", version="2.0")],
        )
        targets = d.target_artifacts()
        assert targets[0].is_platform
        assert [t.artifact_id for t in targets[1:]] == ["appui-omod", "coreapps-omod"]
        assert targets[1].dest_file_name == "appui-1.3.omod"

    def test_no_platform_version_no_war(self):
        d = DistroDescriptor(name="d", version="1")
        assert d.war_artifacts() == []

    def test_webapp_override(self):
        override = Artifact(artifact_id=WEBAPP_ARTIFACT_ID, version="3.0.0-SNAPSHOT", group_id=GROUP_WEB, type=TYPE_WAR)
        d = DistroDescriptor(name="d", version="1", platform_version="2.6.0", webapp_override=override)
        assert d.war_artifacts() == [override]

    def test_property_key_must_match_name(self):
        with pytest.raises(ValueError):
            DistroDescriptor(name="d", version="1", properties={"a": DistroProperty(name="b")})

    def test_resolve_placeholders(self):
        d = DistroDescriptor(
            name="d",
            version="${project.version}",
            modules=[ModuleEntry(name="self", version="${project.parent.version}")],
            properties={"p": DistroProperty(name="p", value="${missing}")},
        )
        resolved = d.resolve_placeholders({"project.version": "1.4", "project.parent.version": "1.4"})
        assert resolved.version == "1.4"
        assert resolved.modules[0].version == "1.4"
        assert resolved.properties["p"].value == "${missing}"
        assert d.version == "${project.version}"

    def test_substitution_is_single_pass(self):
        assert substitute_placeholders("${a}", {"a": "${b}", "b": "x"}) == "${b}"


class TestDifferentialModel:
    def test_empty(self):
        assert UpgradeDifferential().is_empty is True

    def test_maps(self):
        old = Artifact(artifact_id="appui-omod", version="1.0")
        new = Artifact(artifact_id="appui-omod", version="2.0")
        diff = UpgradeDifferential(updates=[ArtifactChange(old=old, new=new)])
        assert diff.update_map == {old: new}
        assert diff.downgrade_map == {}
        assert diff.is_empty is False
