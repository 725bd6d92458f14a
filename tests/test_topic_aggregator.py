from newscast.core.models import CategoryResult, TOPIC_CATEGORIES
from newscast.processing.topic_aggregator import aggregate


def test_every_category_is_present_even_when_empty():
    buckets = aggregate([])
    assert list(buckets) == TOPIC_CATEGORIES
    assert all(items == [] for items in buckets.values())


def test_counts_match_classification(make_email):
    results = [
        (make_email(id='1'), CategoryResult(topic='SECURITY', summary='a')),
        (make_email(id='2'), CategoryResult(topic='TECH_NEWS', summary='b')),
        (make_email(id='3'), CategoryResult(topic='SECURITY', summary='c')),
    ]
    buckets = aggregate(results)

    assert len(buckets['SECURITY']) == 2
    assert len(buckets['TECH_NEWS']) == 1
    assert sum(len(items) for items in buckets.values()) == 3


def test_bucket_order_follows_input_order(make_email):
    results = [
        (make_email(id=str(i), subject=f"Issue {i}"), CategoryResult(topic='BUSINESS', summary=str(i)))
        for i in range(5)
    ]
    buckets = aggregate(results)
    assert [item.subject for item in buckets['BUSINESS']] == [f"Issue {i}" for i in range(5)]


def test_items_carry_email_metadata(make_email):
    email = make_email(subject='Patch Tuesday', sender='Sec Digest')
    buckets = aggregate([(email, CategoryResult(topic='SECURITY', summary='Patch now.'))])

    item = buckets['SECURITY'][0]
    assert item.subject == 'Patch Tuesday'
    assert item.sender == 'Sec Digest'
    assert item.received_at == email.received_at
    assert item.summary == 'Patch now.'


def test_unknown_topic_lands_in_fallback_bucket(make_email):
    result = CategoryResult(topic='SPORTS', summary='x')
    assert result.topic == 'OTHER'

    buckets = aggregate([(make_email(), result)])
    assert len(buckets['OTHER']) == 1
    assert set(buckets) == set(TOPIC_CATEGORIES)


def test_topic_is_normalized_to_upper_case():
    assert CategoryResult(topic='security', summary='x').topic == 'SECURITY'
