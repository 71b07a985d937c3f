import pytest

from mqttcore.topicname import TopicName


@pytest.mark.parametrize(
    "name", ["a", "/", "a b", "sport/tennis/player1", "$SYS/foo", "/finance"]
)
def test_valid_names(name):
    assert TopicName(name).is_valid() is True


@pytest.mark.parametrize(
    "name", ["", "a/#", "#", "+", "sport/+/x", "a\0b", "\0\0\0"]
)
def test_invalid_names(name):
    assert TopicName(name).is_valid() is False


def test_length_limit():
    assert TopicName("a" * 65535).is_valid() is True
    assert TopicName("a" * 65536).is_valid() is False


def test_default_is_empty_and_invalid():
    topic = TopicName()
    assert topic.name == ""
    assert topic.is_valid() is False


def test_levels_keep_empty_parts():
    assert TopicName("a/b/c").levels() == ["a", "b", "c"]
    assert TopicName("/finance").levels() == ["", "finance"]
    assert TopicName("sport/").levels() == ["sport", ""]


@pytest.mark.parametrize("name", ["a", "/", "a/b/c", "//x//", "sport/tennis/"])
def test_level_count_matches_levels(name):
    topic = TopicName(name)
    assert topic.level_count() == len(topic.levels())


def test_level_count_of_empty_name():
    assert TopicName("").level_count() == 0


def test_equality_and_hashing():
    topic = TopicName("a/b")
    names = {topic: 42}
    assert names[TopicName("a/b")] == 42
    assert TopicName("a/b") == topic
    assert TopicName("a/c") != topic


def test_ordering_is_lexical():
    topics = [TopicName("b"), TopicName("a/b"), TopicName("a")]
    assert [t.name for t in sorted(topics)] == sorted(t.name for t in topics)
    assert TopicName("a") < TopicName("b")


def test_str_returns_name():
    assert str(TopicName("sport/tennis")) == "sport/tennis"


def test_is_immutable():
    topic = TopicName("a")
    with pytest.raises(AttributeError):
        topic.name = "b"
    assert topic.name == "a"
    assert topic == TopicName("a")