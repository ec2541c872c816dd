"""Test module for xml_object_mapper package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_object_mapper

    # Assert
    assert xml_object_mapper is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_object_mapper

    # Assert
    assert isinstance(xml_object_mapper.__version__, str)
    assert xml_object_mapper.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import xml_object_mapper

    # Assert
    assert xml_object_mapper.__author__ == "XML Object Mapper Team"


def test_package_all_exports() -> None:
    """Test that every name in __all__ is importable from the package."""
    # Arrange & Act
    import xml_object_mapper

    # Assert
    for name in xml_object_mapper.__all__:
        assert hasattr(xml_object_mapper, name), name
    assert "to_document" in xml_object_mapper.__all__
    assert "XmlObjectBuilder" in xml_object_mapper.__all__


def test_top_level_usage() -> None:
    """Test the documented top-level usage works end to end."""
    # Arrange
    from dataclasses import dataclass

    from xml_object_mapper import XmlAttribute, XmlName, to_document, xml_field

    @XmlName("course")
    @dataclass
    class Course:
        code: str = xml_field(XmlAttribute(), default="MATH101")
        room: str = "A1"

    # Act
    document = to_document(Course())

    # Assert
    assert document.select_entities("course/room")[0].text == "A1"
    assert document.xml == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<course code="MATH101">\n'
        "    <room>A1</room>\n"
        "</course>"
    )
