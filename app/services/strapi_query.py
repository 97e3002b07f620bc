import urllib.parse
from typing import List, Tuple

# brackets, operators and list separators stay readable in the query string
SAFE_CHARS = "[]$,:"


class StrapiQuery:
    """
    Builder for the content service's query-string syntax:

        filters[field][$op]=value, populate=a,b, sort[0]=field:dir,
        pagination[page]=N, pagination[pageSize]=N
    """

    def __init__(self):
        self._params: List[Tuple[str, str]] = []
        self._sort_index = 0

    def filter(self, *fields: str, operator: str, value) -> "StrapiQuery":
        key = "filters" + "".join(f"[{field}]" for field in fields) + f"[{operator}]"
        self._params.append((key, str(value)))
        return self

    def populate(self, *fields: str) -> "StrapiQuery":
        if fields:
            self._params.append(("populate", ",".join(fields)))
        return self

    def sort(self, field: str, direction: str = "desc") -> "StrapiQuery":
        self._params.append((f"sort[{self._sort_index}]", f"{field}:{direction}"))
        self._sort_index += 1
        return self

    def paginate(self, page: int, page_size: int) -> "StrapiQuery":
        self._params.append(("pagination[page]", str(page)))
        self._params.append(("pagination[pageSize]", str(page_size)))
        return self

    @property
    def params(self) -> List[Tuple[str, str]]:
        return list(self._params)

    def to_query_string(self) -> str:
        return urllib.parse.urlencode(self._params, safe=SAFE_CHARS)

    def path(self, resource: str) -> str:
        query_string = self.to_query_string()
        return f"{resource}?{query_string}" if query_string else resource
