import pytest

from src.models import Document
from tests.fakes import FakeDocumentStore, md_file


@pytest.fixture
def cpp_notes_store() -> FakeDocumentStore:
    entries = [
        md_file("Difference_between_angle_brackets_and_double_quotes_while_including.md"),
        md_file("Const_iterator_vs_const_iterator.md"),
        Document(name="images", type="dir"),
        Document(name="include_guides.md", type="dir"),
        md_file("README.txt"),
        md_file("Using_std_transform.md"),
    ]
    contents = {
        "Difference_between_angle_brackets_and_double_quotes_while_including.md": (
            "tags: include, format\n---\n# Angle brackets vs quotes\n"
        ),
        "Const_iterator_vs_const_iterator.md": (
            "tags: Iterator , CONST, stl\n\n# const_iterator\n"
        ),
        "README.txt": "tags: include\n",
        "Using_std_transform.md": "# Using std::transform\n\nNo tags here.\n",
    }
    return FakeDocumentStore(entries, contents)
