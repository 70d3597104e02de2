def build_local_queries(location) -> list[str]:
    """
    Builds city, state and country level news queries.
    Missing fields contribute nothing.
    """
    queries = []

    if not location:
        return queries

    city = location.get("city")
    state = location.get("state")
    country = location.get("country")

    if city:
        queries.append(f"{city} news")
        queries.append(f"{city} local news")

    if state:
        queries.append(f"{state} local news")
        queries.append(f"{state} latest news")

    # National level
    if country:
        queries.append(f"{country} national news")
        queries.append(f"{country} latest news")

    return queries


def build_business_queries(business_interests) -> list[str]:
    queries = []

    if not isinstance(business_interests, (list, tuple)):
        return queries

    for interest in business_interests:
        if not isinstance(interest, str):
            continue
        interest = interest.strip()
        if interest:
            queries.append(f"{interest} business news")
            queries.append(f"{interest} trends")

    return queries


def build_community_queries(community) -> list[str]:
    if not isinstance(community, str) or not community.strip():
        return []

    community = community.strip()
    return [
        f"{community} schemes",
        f"{community} news",
        f"{community} initiatives",
    ]


def build_all_queries(data) -> list[str]:
    """
    Turns the user's preferences into the ordered list of search queries:
    local first, then business, then community.
    Blank queries are dropped and exact duplicates keep their first position.
    """
    if not data:
        return []

    all_queries = (
        build_local_queries(data.get("location"))
        + build_business_queries(data.get("businessInterests"))
        + build_community_queries(data.get("community"))
    )

    unique_queries = []
    seen = set()
    for query in all_queries:
        if query and query.strip() and query not in seen:
            seen.add(query)
            unique_queries.append(query)

    return unique_queries
