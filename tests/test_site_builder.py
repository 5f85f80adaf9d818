"""Tests for site.xml document assembly."""

from lxml import etree

from p2site.domain import FeatureIdentity
from p2site.services.site_builder import SiteBuilder

A = FeatureIdentity("featureA", "1.0.0")
B = FeatureIdentity("featureB", "2.0.0")
C = FeatureIdentity("featureC", "3.0.0")


def parsed(builder: SiteBuilder):
    return etree.fromstring(builder.to_bytes())


class TestSiteBuilder:
    """Tests for SiteBuilder."""

    def test_empty_site(self):
        root = parsed(SiteBuilder())
        assert root.tag == "site"
        assert len(root) == 0

    def test_feature_attributes(self):
        builder = SiteBuilder()
        builder.add_feature(A, "features/featureA_1.0.0.jar")

        feature = parsed(builder).find("feature")

        assert feature.get("url") == "features/featureA_1.0.0.jar"
        assert feature.get("id") == "featureA"
        assert feature.get("version") == "1.0.0"
        assert feature.find("category") is None

    def test_feature_with_category(self):
        builder = SiteBuilder()
        entry = builder.add_feature(A, "features/a.jar", "Tools")

        root = parsed(builder)

        assert entry.category == "Tools"
        assert root.find("feature/category").get("name") == "Tools"
        category_def = root.find("category-def")
        assert category_def.get("name") == "Tools"
        assert category_def.get("label") == "Tools"

    def test_category_defs_deduplicated(self):
        builder = SiteBuilder()
        builder.add_feature(A, "features/a.jar", "Tools")
        builder.add_feature(B, "features/b.jar", "Tools")
        builder.add_feature(C, "features/c.jar", "Extras")

        root = parsed(builder)

        assert [d.get("name") for d in root.findall("category-def")] == ["Tools", "Extras"]
        assert builder.categories == ["Tools", "Extras"]

    def test_definition_emitted_before_first_feature_using_it(self):
        builder = SiteBuilder()
        builder.add_feature(A, "features/a.jar")
        builder.add_feature(B, "features/b.jar", "Tools")

        tags = [child.tag for child in parsed(builder)]

        assert tags == ["feature", "category-def", "feature"]

    def test_explicit_category_first(self):
        builder = SiteBuilder()
        builder.add_explicit_category("Main")
        builder.add_feature(A, "features/a.jar", "Main")
        builder.add_feature(B, "features/b.jar", "Main")

        root = parsed(builder)

        assert [child.tag for child in root] == ["category-def", "feature", "feature"]
        assert len(root.findall("category-def")) == 1
        assert [c.get("name") for c in root.findall("feature/category")] == ["Main", "Main"]

    def test_features_in_insertion_order(self):
        builder = SiteBuilder()
        for identity in (C, A, B):
            builder.add_feature(identity, f"features/{identity}.jar")

        assert [f.get("id") for f in parsed(builder).findall("feature")] == ["featureC", "featureA", "featureB"]
        assert [e.identity for e in builder.features] == [C, A, B]

    def test_serialization_is_utf8_with_declaration(self):
        builder = SiteBuilder()
        builder.add_feature(A, "features/a.jar", "Outils généraux")

        data = builder.to_bytes()

        assert data.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")
        assert "Outils généraux".encode("utf-8") in data
