"""Tests for directive resolution with property-then-type fallback."""

from dataclasses import dataclass

from xml_object_mapper.mapping import (
    MappingTarget,
    ResolvedMetadata,
    ToStringConverter,
    XmlAdapt,
    XmlAttribute,
    XmlIgnore,
    XmlName,
    XmlString,
    XmlWrapper,
    first_directive,
    resolve,
    resolve_metadata,
    xml_field,
)
from xml_object_mapper.mapping.directives import property_directives


class PercentConverter:
    def __call__(self, value) -> str:
        return f"{value}%"


@XmlName("pupil")
@XmlAttribute("kind")
class Pupil:
    pass


@XmlIgnore()
class Hidden:
    pass


class TestFirstDirective:
    """Test the ordered lookup over directive sources."""

    def test_first_source_wins(self) -> None:
        """Test earlier sources take precedence over later ones."""
        found = first_directive(XmlName, [XmlName("property")], [XmlName("type")])

        assert found == XmlName("property")

    def test_falls_back_to_later_sources(self) -> None:
        """Test later sources are searched when earlier ones lack the kind."""
        found = first_directive(XmlName, [XmlIgnore()], (), [XmlName("type")])

        assert found == XmlName("type")

    def test_missing_kind(self) -> None:
        """Test None is returned when no source has the kind."""
        assert first_directive(XmlWrapper, [XmlName("a")], [XmlIgnore()]) is None
        assert first_directive(XmlWrapper) is None


class TestResolve:
    """Test single directive kind resolution for mapping targets."""

    def test_type_target(self) -> None:
        """Test type targets carry the type's own directives and name."""
        target = MappingTarget.for_type(Pupil)

        assert target.name == "Pupil"
        assert target.is_type
        assert resolve(XmlName, target) == XmlName("pupil")

    def test_property_target_falls_back_to_value_type(self) -> None:
        """Test an undecorated property uses the directives of the value's type."""
        target = MappingTarget.for_property("student")

        assert not target.is_type
        assert resolve(XmlName, target) is None
        assert resolve(XmlName, target, Pupil) == XmlName("pupil")

    def test_property_directive_overrides_type(self) -> None:
        """Test property directives win over type directives of the same kind."""
        target = MappingTarget.for_property("student", [XmlName("best")])

        assert resolve(XmlName, target, Pupil) == XmlName("best")
        assert resolve(XmlAttribute, target, Pupil) == XmlAttribute("kind")


class TestResolveMetadata:
    """Test complete metadata resolution."""

    def test_no_directives(self) -> None:
        """Test a plain value resolves to default metadata."""
        metadata = resolve_metadata(MappingTarget.for_property("age"), 24)

        assert metadata == ResolvedMetadata()
        assert not metadata.ignored
        assert not metadata.is_attribute
        assert not metadata.is_wrapped
        assert not metadata.has_explicit_converter
        assert isinstance(metadata.string_converter, ToStringConverter)

    def test_fallback_uses_runtime_type_of_value(self) -> None:
        """Test type directives come from the value, not the declared type."""
        @dataclass
        class School:
            member: object = None

        target = MappingTarget.for_property("member", property_directives(School, "member"))

        assert resolve_metadata(target, Hidden()).ignored
        assert not resolve_metadata(target, Pupil()).ignored
        assert resolve_metadata(target, Pupil()).entity_name == "pupil"

    def test_all_directives(self) -> None:
        """Test every directive kind is reflected in the metadata."""
        def adapter(entity) -> None:
            pass

        converter = PercentConverter()
        target = MappingTarget.for_property("grade", [
            XmlName("mark"),
            XmlAttribute("studentGrade"),
            XmlWrapper("grades"),
            XmlString(converter),
            XmlAdapt(adapter),
        ])

        metadata = resolve_metadata(target, 19.01)

        assert metadata.entity_name == "mark"
        assert metadata.attribute_name == "studentGrade"
        assert metadata.wrapper_name == "grades"
        assert metadata.converter is converter
        assert metadata.string_converter is converter
        assert metadata.adapter is adapter
        assert metadata.is_attribute
        assert metadata.is_wrapped
        assert metadata.has_explicit_converter

    def test_empty_names(self) -> None:
        """Test unnamed directives are present with empty names."""
        target = MappingTarget.for_property("grades", [XmlName(), XmlAttribute(), XmlWrapper()])

        metadata = resolve_metadata(target, [1])

        assert metadata.entity_name is None
        assert metadata.attribute_name == ""
        assert metadata.wrapper_name == ""
        assert metadata.is_attribute
        assert metadata.is_wrapped

    def test_converter_class_is_instantiated(self) -> None:
        """Test converter classes are instantiated on use."""
        target = MappingTarget.for_property("name", [XmlString()])

        metadata = resolve_metadata(target, "John")

        assert metadata.converter is ToStringConverter
        assert isinstance(metadata.string_converter, ToStringConverter)

    def test_field_directives_resolve(self) -> None:
        """Test directives declared on dataclass fields reach the metadata."""
        @dataclass
        class Student:
            name: str = xml_field(XmlAttribute(), default="John")

        target = MappingTarget.for_property("name", property_directives(Student, "name"))

        assert resolve_metadata(target, "John").attribute_name == ""
