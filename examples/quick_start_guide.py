#!/usr/bin/env python3
"""
Quick Start Guide for the XML Object Mapper.

This example maps a small object graph to an XML document, shows the
directives that shape the output and then reshapes the resulting tree with
the document operations.
"""

import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_object_mapper import (
    BuilderConfig,
    StringConverter,
    XmlAttribute,
    XmlIgnore,
    XmlName,
    XmlObjectBuilder,
    XmlString,
    XmlWrapper,
    to_document,
    xml_field,
)


class AddPercentage(StringConverter[float]):
    """Renders grades as percentages."""

    value_type = float

    def convert(self, value: float) -> str:
        return f"{value}%"


@dataclass
class Address:
    street: str
    city: str


@XmlName("student")
@dataclass
class Student:
    name: str
    average: Annotated[float, XmlAttribute("studentGrade"), XmlString(AddPercentage)]
    grades: List[int] = xml_field(XmlWrapper(), XmlName("grade"), default_factory=list)
    address: Address = None
    password: str = xml_field(XmlIgnore(), default="secret")


@XmlName("course")
@dataclass
class Course:
    title: str
    students: List[Student] = field(default_factory=list)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - XML Object Mapper")
    print("=" * 45)

    course = Course(
        "Mathematics",
        [
            Student("John", 19.01, [15, 16], Address("Main Street", "Lisbon")),
            Student("Mary", 17.5, [18]),
        ],
    )

    # Step 1: Build a document from the object graph
    print("\nStep 1: Building the document")
    print("-" * 30)

    document = to_document(course, version="1.1")
    print(document.xml)

    # Step 2: Query the tree
    print("\nStep 2: Selecting entities")
    print("-" * 30)

    for grade in document.select_entities("grades/grade"):
        print(f"{grade.parent.parent.name} grade: {grade.text}")

    # Step 3: Reshape the tree
    print("\nStep 3: Reshaping the tree")
    print("-" * 30)

    document.put_attribute("scale", "20", "grade")
    document.rename_attribute("studentGrade", "average", "student")
    document.rename_entity("student", "pupil")
    document.remove_entity("address")
    print(document.xml)

    return document


def configured_builder_example():
    """Reusable builder with configuration and statistics."""

    print("\nConfigured builder")
    print("-" * 30)

    config = BuilderConfig.create(
        document__encoding="UTF-16",
        correlation_id="quick-start",
    )
    builder = XmlObjectBuilder(config)

    for student in (Student("John", 19.01), Student("Mary", 17.5, [18, 19])):
        builder.document(student)

    metrics = builder.last_metrics
    print(f"Entities in last build: {metrics.entities_created}")
    print(f"Attributes in last build: {metrics.attributes_written}")
    print(f"Statistics: {builder.statistics}")

    with tempfile.TemporaryDirectory() as directory:
        path = Path(directory) / "student.xml"
        builder.document(Student("Ana", 18.0)).write_to_file(path)
        print(f"Wrote {path.stat().st_size} bytes of UTF-16 XML")


if __name__ == "__main__":
    quick_start_example()
    configured_builder_example()
