from news_pipeline.query_builder import (
    build_all_queries,
    build_business_queries,
    build_community_queries,
    build_local_queries,
)


def test_local_queries_from_full_location():
    queries = build_local_queries({"city": "Ramgarh", "state": "Jharkhand", "country": "India"})

    assert len(queries) == 6
    assert "Ramgarh news" in queries
    assert "Ramgarh local news" in queries
    assert "Jharkhand local news" in queries
    assert "India national news" in queries


def test_local_queries_skip_missing_fields():
    queries = build_local_queries({"state": "Jharkhand", "country": "India"})

    assert "Jharkhand local news" in queries
    assert "India national news" in queries
    assert not any("None" in q or "undefined" in q for q in queries)


def test_local_queries_country_only():
    assert build_local_queries({"country": "India"}) == ["India national news", "India latest news"]


def test_local_queries_without_location():
    assert build_local_queries(None) == []
    assert build_local_queries({}) == []


def test_business_queries():
    queries = build_business_queries(["Bakery", "Gift Studio"])

    assert queries == [
        "Bakery business news",
        "Bakery trends",
        "Gift Studio business news",
        "Gift Studio trends",
    ]


def test_business_queries_skip_blank_entries():
    assert build_business_queries(["Bakery", "", "  "]) == ["Bakery business news", "Bakery trends"]


def test_business_queries_trim_and_ignore_non_strings():
    assert build_business_queries(["  Tea  ", 42, None]) == ["Tea business news", "Tea trends"]


def test_business_queries_non_list_input():
    assert build_business_queries(None) == []
    assert build_business_queries([]) == []
    assert build_business_queries("Bakery") == []


def test_community_queries():
    assert build_community_queries("Dalit empowerment") == [
        "Dalit empowerment schemes",
        "Dalit empowerment news",
        "Dalit empowerment initiatives",
    ]


def test_community_queries_blank_or_missing():
    assert build_community_queries("") == []
    assert build_community_queries("   ") == []
    assert build_community_queries(None) == []


def test_all_queries_keep_group_order():
    queries = build_all_queries(
        {
            "location": {"city": "Ramgarh", "state": "Jharkhand", "country": "India"},
            "businessInterests": ["Bakery"],
            "community": "Dalit empowerment",
        }
    )

    assert queries[0] == "Ramgarh news"
    assert queries.index("India latest news") < queries.index("Bakery business news")
    assert queries[-1] == "Dalit empowerment initiatives"
    assert len(queries) == 11


def test_all_queries_remove_duplicates_keeping_first():
    # "News local news" is produced by both city and state
    queries = build_all_queries({"location": {"city": "News", "state": "News", "country": "India"}})

    assert len(queries) == len(set(queries))
    assert queries == [
        "News news",
        "News local news",
        "News latest news",
        "India national news",
        "India latest news",
    ]


def test_all_queries_dedup_is_case_sensitive():
    queries = build_all_queries({"location": {"city": "Delhi"}, "community": "delhi"})

    assert "Delhi news" in queries
    assert "delhi news" in queries


def test_all_queries_never_blank():
    queries = build_all_queries({"location": {"city": "Pune"}, "businessInterests": [" "], "community": " "})

    assert all(q.strip() for q in queries)


def test_all_queries_without_data():
    assert build_all_queries(None) == []
    assert build_all_queries({}) == []
