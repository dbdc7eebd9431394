from dataclasses import dataclass

import pytest

from pokemonle.types import (
    LanguageQuery,
    PaginateQuery,
    PaginatedResource,
    ResourceId,
    SearchQuery,
    VersionGroupQuery,
    VersionQuery,
    WithName,
    WithSlot,
)


@dataclass
class Thing:
    id: int
    identifier: str


def test_with_name_from_tuple():
    thing = Thing(1, "bulbasaur")
    named = WithName.from_tuple((thing, "Bulbasaur"))
    assert named.item is thing
    assert named.name == "Bulbasaur"


def test_with_name_to_dict_flattens_item():
    named = WithName(Thing(4, "charmander"), "Charmander")
    assert named.to_dict() == {"id": 4, "identifier": "charmander", "name": "Charmander"}
    assert list(named.to_dict()) == ["id", "identifier", "name"]


def test_with_name_to_dict_rejects_scalar_item():
    with pytest.raises(TypeError):
        WithName(5, "five").to_dict()


def test_with_slot_to_dict():
    slotted = WithSlot(Thing(2, "ivysaur"), slot=3, is_hidden=True)
    result = slotted.to_dict()
    assert result["slot"] == 3
    assert result["is_hidden"] is True
    assert result["identifier"] == "ivysaur"


def test_from_list_single_page():
    page = PaginatedResource.from_list([10, 20, 30])
    assert page.data == [10, 20, 30]
    assert page.page == 1
    assert page.total_pages == 1
    assert page.per_page == len(page.data)
    assert page.total_items == len(page.data)


def test_from_list_empty():
    page = PaginatedResource.from_list([])
    assert page.data == []
    assert page.per_page == 0
    assert page.total_items == 0


def test_map_preserves_metadata():
    page = PaginatedResource([1, 2], page=3, per_page=2, total_pages=5, total_items=9)
    mapped = page.map(str)
    assert mapped.data == ["1", "2"]
    assert (mapped.page, mapped.per_page, mapped.total_pages, mapped.total_items) == (3, 2, 5, 9)


def test_map_data_receives_whole_list():
    page = PaginatedResource.from_list([1, 2, 3])
    reversed_page = page.map_data(lambda items: list(reversed(items)))
    assert reversed_page.data == [3, 2, 1]
    assert reversed_page.total_items == page.total_items


def test_paginated_to_dict_serialises_records():
    page = PaginatedResource.from_list([Thing(1, "a"), 7])
    result = page.to_dict()
    assert result["data"] == [{"id": 1, "identifier": "a"}, 7]
    assert result["total_items"] == 2


def test_language_query_default():
    assert LanguageQuery().lang == 12
    assert LanguageQuery.from_mapping({}).lang == 12


def test_language_query_parses_string():
    assert LanguageQuery.from_mapping({"lang": "9"}).lang == 9


@pytest.mark.parametrize("bad", ["abc", True, None, 1.5])
def test_language_query_rejects_bad_values(bad):
    with pytest.raises(ValueError):
        LanguageQuery.from_mapping({"lang": bad})


def test_paginate_query_defaults():
    query = PaginateQuery()
    assert (query.page, query.per_page) == (1, 25)
    assert PaginateQuery.from_mapping({}) == query


def test_paginate_query_partial_mapping():
    query = PaginateQuery.from_mapping({"page": "3"})
    assert query.page == 3
    assert query.per_page == 25


def test_paginate_query_rejects_negative():
    with pytest.raises(ValueError):
        PaginateQuery.from_mapping({"per_page": -1})


def test_simple_queries():
    assert ResourceId(id=4).id == 4
    assert VersionGroupQuery().version_group is None
    assert VersionQuery(version=6).version == 6
    assert SearchQuery().q is None
    assert SearchQuery(q="pika").q == "pika"