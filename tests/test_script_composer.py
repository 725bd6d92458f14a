from datetime import datetime

from newscast.core.models import DigestItem, Speaker
from newscast.processing.script_composer import compose, format_clock, split_sentences
from newscast.processing.topic_aggregator import empty_buckets

NOW = datetime(2026, 10, 19, 9, 5)


def _item(sender, summary):
    return DigestItem(subject='s', sender=sender, received_at=NOW, summary=summary)


def test_empty_buckets_give_opening_and_closing_only():
    script = compose(empty_buckets(), now=NOW)
    assert [line.speaker for line in script] == [
        Speaker.HOST, Speaker.GUEST, Speaker.HOST, Speaker.GUEST, Speaker.HOST
    ]
    assert "9:05 AM" in script[0].text


def test_single_item_two_sentences():
    buckets = empty_buckets()
    buckets['TECH_NEWS'] = [_item('A', 'X happened. Y followed.')]

    script = compose(buckets, now=NOW)
    texts = [line.text for line in script]

    transitions = [t for t in texts if t.startswith("Let's dive into")]
    assert transitions == ["Let's dive into tech news. What are the key updates in this area?"]
    assert not any('security' in t for t in transitions)

    body = script[3:-3]
    assert [line.speaker for line in body] == [Speaker.GUEST, Speaker.HOST, Speaker.GUEST]
    assert body[0].text == "From A, we have X happened."
    assert body[2].text == "Y followed."


def test_single_sentence_item_has_one_guest_line():
    buckets = empty_buckets()
    buckets['SECURITY'] = [_item('B', 'Only one sentence here')]

    script = compose(buckets, now=NOW)
    body = script[3:-3]
    assert len(body) == 1
    assert body[0].speaker == Speaker.GUEST
    assert body[0].text == "From B, we have Only one sentence here"


def test_remaining_sentences_joined_with_single_spaces():
    buckets = empty_buckets()
    buckets['BUSINESS'] = [_item('C', 'One.  Two.\nThree.')]

    body = compose(buckets, now=NOW)[3:-3]
    assert body[-1].text == "Two. Three."


def test_prompt_between_items_in_same_topic():
    buckets = empty_buckets()
    buckets['EDUCATIONAL'] = [_item('A', 'First.'), _item('B', 'Second.'), _item('C', 'Third.')]

    texts = [line.text for line in compose(buckets, now=NOW)]
    assert texts.count("What other updates do we have in this area?") == 2
    assert texts[-4] == "From C, we have Third."


def test_topics_follow_category_order():
    buckets = empty_buckets()
    buckets['OTHER'] = [_item('Z', 'Misc.')]
    buckets['TECH_NEWS'] = [_item('A', 'Tech.')]
    buckets['PRODUCT_UPDATES'] = [_item('P', 'Launch.')]

    transitions = [line.text for line in compose(buckets, now=NOW) if line.text.startswith("Let's dive into")]
    assert [t.split('.')[0] for t in transitions] == [
        "Let's dive into tech news",
        "Let's dive into product updates",
        "Let's dive into other",
    ]


def test_guest_lines_cover_every_item():
    buckets = empty_buckets()
    buckets['TECH_NEWS'] = [_item('A', 'One. Two.'), _item('B', 'Three.')]
    buckets['BUSINESS'] = [_item('C', 'Four. Five. Six.')]

    body_guest = [l for l in compose(buckets, now=NOW)[2:-2] if l.speaker == Speaker.GUEST]
    assert len(body_guest) == 2 + 1 + 2


def test_compose_is_deterministic():
    buckets = empty_buckets()
    buckets['SECURITY'] = [_item('A', 'X happened. Y followed.')]
    assert compose(buckets, now=NOW) == compose(buckets, now=NOW)


def test_format_clock():
    assert format_clock(datetime(2026, 1, 1, 0, 7)) == "12:07 AM"
    assert format_clock(datetime(2026, 1, 1, 12, 0)) == "12:00 PM"
    assert format_clock(datetime(2026, 1, 1, 23, 59)) == "11:59 PM"


def test_split_sentences_only_after_periods():
    assert split_sentences("Wow! Really? Yes. Done.") == ["Wow! Really? Yes.", "Done."]
