from app.services.strapi_query import StrapiQuery


def test_builds_filter_populate_sort_and_pagination():
    query = (
        StrapiQuery()
        .filter("tags", "slug", operator="$eq", value="python")
        .populate("cover", "tags")
        .paginate(2, 8)
        .sort("createdAt", "desc")
    )

    assert query.to_query_string() == (
        "filters[tags][slug][$eq]=python&populate=cover,tags"
        "&pagination[page]=2&pagination[pageSize]=8&sort[0]=createdAt:desc"
    )


def test_repeated_filters_are_kept_in_order():
    query = StrapiQuery()
    for name in ["python", "rust"]:
        query.filter("tags", "name", operator="$eq", value=name)

    assert query.params == [
        ("filters[tags][name][$eq]", "python"),
        ("filters[tags][name][$eq]", "rust"),
    ]


def test_sort_indexes_increment():
    query = StrapiQuery().sort("createdAt").sort("title", "asc")
    assert query.to_query_string() == "sort[0]=createdAt:desc&sort[1]=title:asc"


def test_values_are_url_encoded():
    query = StrapiQuery().filter("title", operator="$containsi", value="a&b c")
    assert query.to_query_string() == "filters[title][$containsi]=a%26b+c"


def test_path_without_params_is_bare_resource():
    assert StrapiQuery().path("/api/posts") == "/api/posts"
    assert StrapiQuery().populate().path("/api/posts") == "/api/posts"


def test_path_appends_query_string():
    assert StrapiQuery().populate("image").path("/api/tags") == "/api/tags?populate=image"
