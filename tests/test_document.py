import pytest

from jsonrest.document import JSON, json_path_query

SAMPLE = r"""
{
    "key1" : "val1",
    "key2" : {
        "sub1" : "[test] ] [ { } }{ ",
        "sub2" : {
            "list1" : [ "val1", "val2", "val3" ],
            "sub2.2" : "val2.2"
        },
        "sub3" : [
            { "sub3.1" : "valsub3.1", "sub3.2" : "valsub3.2" },
            { "sub3.3" : "{test}", "sub3.4" : "[test] ] [ { } }{" }
        ]
    },
    "key3" : {
        "sub2" : "valsub2",
        "sub3" : "\r\n\\\t?\'\""
    },
    "key4" : [ "l1 \" ", "l2", { "l3" : "vall3" }, [ "l4.1", "l4.2" ] ],
    "key5" : [ -992.1, true, false, 12a ],
    "key6" : [ -242.1, 123, -456, true, false, 1.2.3, TRUE, True ]
}
"""


@pytest.fixture
def document():
    doc = JSON()
    doc.parse(SAMPLE)
    return doc


def test_parse_file(tmp_path):
    path = tmp_path / "test.json"
    path.write_text(SAMPLE, encoding="utf-8")
    doc = JSON()
    doc.parse_file(path)
    assert doc["key1"].text() == "val1"
    assert doc["key2"]["sub3"][1]["sub3.3"].text() == "{test}"


def test_parse_file_missing(tmp_path):
    doc = JSON()
    with pytest.raises(OSError):
        doc.parse_file(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "path, expected",
    [
        (("key1",), "val1"),
        (("key2",), "{object}"),
        (("key2", "sub1"), "[test] ] [ { } }{ "),
        (("key2", "sub2"), "{object}"),
        (("key2", "sub2", "list1"), "{list}"),
        (("key2", "sub2", "list1", 0), "val1"),
        (("key2", "sub2", "list1", 1), "val2"),
        (("key2", "sub2", "list1", 2), "val3"),
        (("key2", "sub2", "list1", 3), "{invalid}"),
        (("key2", "sub2", "sub2.2"), "val2.2"),
        (("key2", "sub3"), "{list}"),
        (("key2", "sub3", 0, "sub3.1"), "valsub3.1"),
        (("key2", "sub3", 0, "sub3.2"), "valsub3.2"),
        (("key2", "sub3", 1, "sub3.3"), "{test}"),
        (("key2", "sub3", 1, "sub3.4"), "[test] ] [ { } }{"),
        (("key3", "sub2"), "valsub2"),
        (("key4", 0), 'l1 " '),
        (("key3", "sub3"), "\r\n\\\t?'\""),
        (("key4", 1), "l2"),
        (("key4", 2), "{object}"),
        (("key4", 2, "l3"), "vall3"),
        (("key4", 3), "{list}"),
        (("key4", 3, 0), "l4.1"),
        (("key4", 3, 1), "l4.2"),
        (("key4", 3, 0, 0), "{invalid}"),
        (("key4", 3, 0, "test"), "{invalid}"),
        (("key5", 0), "-992.1"),
        (("key5", 1), "true"),
        (("key5", 2), "false"),
        (("key5", 3), "{illegal}"),
        (("key6", 5), "{illegal}"),
        (("key555",), "{invalid}"),
    ],
)
def test_lookup(document, path, expected):
    node = document
    for step in path:
        node = node[step]
    assert node.text() == expected


def test_operations_on_invalid(document):
    document["key555"].add_value("1", "test")
    assert document["key555"].text() == "{invalid}"
    assert document["key555"]["test"].text() == "{invalid}"

    document["key556"][4].add_value("2", "test2")
    assert document["key556"][0].text() == "{invalid}"
    assert document["key556"][4].text() == "{invalid}"
    assert document["key556"].text() == "{invalid}"

    document["key556"].set_value(True)
    assert document["key556"].text() == "{invalid}"


def test_reading_values(document):
    assert document["key6"][0].to_double() == -242.1
    assert document["key6"][1].to_int() == 123
    assert document["key6"][2].to_int() == -456
    assert document["key6"][3].to_bool() is True
    assert document["key6"][4].to_bool() is False
    assert document["key6"][6].to_bool() is True
    assert document["key6"][7].to_bool() is True


def test_reassigning_values(document):
    document["key6"][0].set_value(True)
    document["key6"][4].set_value(567.8)
    assert document["key6"][4].to_double() == 567.8
    assert document["key6"][0].to_bool() is True

    document["key6"][2].set_value(89)
    document["key6"][3].set_value(-789)
    assert document["key6"][0].text() == "true"
    assert document["key6"][4].text() == "567.8"
    assert document["key6"][2].text() == "89"
    assert document["key6"][3].text() == "-789"


def test_writing_values(document):
    j1 = JSON()
    j1.assign(document["key5"][1])
    assert j1.text() == "true"

    document["key5"][1].set_value("meow")
    assert document["key5"][1].text() == "meow"
    assert j1.text() == "true"

    j2 = JSON()
    j2.assign(document["key2"].add_value("val2"))
    assert j2.text() == "val2"

    j3 = JSON()
    j3.assign(document["key2"]["key3"].add_object())
    assert j3.text() == "{invalid}"
    assert j3.is_valid() is False

    document.add_value("val6", "newkey")
    assert document["newkey"].text() == "val6"


def test_building_tree(document):
    document.add_object("newobj1")
    document["newobj1"].add_list("list1")
    document["newobj1"]["list1"].add_object()
    document["newobj1"]["list1"].add_value("val1")
    document["newobj1"]["list1"].add_list()
    document["newobj1"]["list1"][2].add_value("test")
    document["newobj1"]["list1"][0].add_value("test2")
    document["newobj1"]["list1"][0].add_value("test3", "testkey")
    document["newobj1"]["list1"][0].add_value(-707.43, "testkey3")

    assert document["newobj1"].text() == "{object}"
    assert document["newobj1"]["list1"].text() == "{list}"
    assert document["newobj1"]["list1"][0].text() == "{object}"
    assert document["newobj1"]["list1"][1].text() == "val1"
    assert document["newobj1"]["list1"][2].text() == "{list}"
    assert document["newobj1"]["list1"][2][0].text() == "test"
    assert document["newobj1"]["list1"][0]["key0"].text() == "test2"
    assert document["newobj1"]["list1"][0]["testkey"].text() == "test3"
    assert document["newobj1"]["list1"][0]["testkey3"].text() == "-707.43"
    assert document["newobj1"]["list1"].size() == 3


def test_new_document_add_value():
    json2 = JSON()
    json2.add_value("test", "key")
    assert json2["key"].text() == "test"
    assert json2.stringify() == '{"key" : "test"}'
    assert json2.stringify(True) == '{\r\n\t"key" : "test"\r\n}'


def test_empty_document():
    doc = JSON()
    assert doc.text() == "{invalid}"
    assert doc.stringify() == "{}"
    assert doc.is_valid() is False
    assert doc.size() == -1
    assert doc.keys() == []
    assert doc["anything"].text() == "{invalid}"
    assert doc.to_int() == 0
    doc.set_value("ignored")
    assert doc.text() == "{invalid}"


def test_returned_document():
    j = JSON()
    j.add_value("test", "test")
    assert j["test"].text() == "test"
    assert j.is_valid() is True
    assert j.keys() == ["test"]


def test_object_copy():
    jorig = JSON()
    jorig.add_object("obj1")
    jorig["obj1"].add_list("list1")
    jorig["obj1"]["list1"].add_value("test")

    jcopy = jorig.copy()
    assert jcopy["obj1"]["list1"][0].text() == "test"
    jcopy["obj1"]["list1"][0].set_value("test2")
    assert jcopy["obj1"]["list1"][0].text() == "test2"
    assert jorig["obj1"]["list1"][0].text() == "test"

    jo = jorig["obj1"].add_object("obj2")
    jo.add_value("test", "val")
    assert jo["val"].text() == "test"
    assert jorig["obj1"]["obj2"]["val"].text() == "test"
    assert jcopy["obj1"]["obj2"].text() == "{invalid}"

    jorig.assign(jorig["obj1"]["list1"][0])
    assert jorig.text() == "test"


def test_assign_from_document():
    source = JSON()
    source.add_value("test", "key")
    target = JSON()
    target.assign(source)
    assert target.stringify() == source.stringify()
    source["key"].set_value("changed")
    assert target["key"].text() == "test"


def test_stringify_round_trip(document):
    again = JSON()
    again.parse(document.stringify())
    assert again["key2"]["sub3"][1]["sub3.4"].text() == "[test] ] [ { } }{"
    assert again["key3"]["sub3"].text() == "\r\n\\\t?'\""
    assert sorted(again.keys()) == sorted(document.keys())
    formatted = JSON()
    formatted.parse(document.stringify(True))
    assert formatted["key4"][3][1].text() == "l4.2"


@pytest.mark.parametrize(
    "query, expected",
    [
        ("key2/sub3[1]/sub3.3", "{test}"),
        ("invalidkey/invalid[6]/keyu", "{invalid}"),
        ("key2/sub3", "{list}"),
        ("key2/sub3[1]/sub3.3invalid", "{invalid}"),
    ],
)
def test_json_path_query(document, query, expected):
    assert json_path_query(document, query).text() == expected


def test_json_path_query_empty_index(document):
    with pytest.raises(ValueError):
        json_path_query(document, "key2/sub3[]")


def test_json_path_query_empty_path(document):
    assert json_path_query(document, "") is document