"""검색 쿼리 생성 테스트"""
from src.utils.url_utils import build_search_query, build_search_url


class TestBuildSearchQuery:
    def test_name_only(self):
        assert build_search_query("Notebook Dell") == "q=Notebook%20Dell&engine=google_shopping"

    def test_name_is_sanitized_before_encoding(self):
        """보이지 않는 문자는 %C2%A0 등으로 인코딩되지 않아야 함"""
        query = build_search_query("  Produto\u00a0com\u200b espaços ")
        assert query == "q=Produto%20com%20espa%C3%A7os&engine=google_shopping"

    def test_reserved_characters_encoded(self):
        query = build_search_query("Cabo USB-C & HDMI/4K")
        assert query.startswith("q=Cabo%20USB-C%20%26%20HDMI%2F4K&")

    def test_category_appended(self):
        query = build_search_query("Galaxy S24", "celulares")
        assert query == "q=Galaxy%20S24&engine=google_shopping&category=celulares"

    def test_category_absent_when_empty(self):
        """빈 카테고리는 파라미터 자체를 생략"""
        for category in (None, "", "   ", "\u200b"):
            query = build_search_query("Mouse", category)
            assert "category" not in query

    def test_custom_engine_and_param(self):
        query = build_search_query("Mouse", "perifericos", engine="shop", category_param="cat")
        assert query == "q=Mouse&engine=shop&cat=perifericos"

    def test_deterministic(self):
        assert build_search_query("Mouse", "x") == build_search_query("Mouse", "x")


class TestBuildSearchUrl:
    def test_appends_api_key(self):
        url = build_search_url("https://serpapi.com/search.json", "q=Mouse&engine=google_shopping", "abc")
        assert url == "https://serpapi.com/search.json?q=Mouse&engine=google_shopping&api_key=abc"

    def test_base_url_with_query(self):
        url = build_search_url("https://proxy.example/search?hl=pt-br", "q=Mouse", "abc")
        assert url == "https://proxy.example/search?hl=pt-br&q=Mouse&api_key=abc"
