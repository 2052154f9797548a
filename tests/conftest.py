"""
Shared fixtures for the KOBIS scraper tests.

Markup fixtures mirror the structure of the live pages, trimmed to the
elements the decoders read.
"""

from typing import Dict, List, Optional, Tuple

import pytest

from kobis_scrapers import KobisScraper, KobisSettings
from kobis_scrapers.config import ACTOR_LIST_PATH, DAILY_BOX_OFFICE_PATH, DETAIL_PATH, SEARCH_PATH

BASE_URL = "https://www.kobis.or.kr"


def _ranking_row(rank: int, title: str, code: int, open_date: str) -> str:
    return (
        "<tr>"
        f"<td>{rank}</td>"
        f"<td><span class=\"ellip per90\"><a href=\"#\" title=\"{title}\" "
        f"onclick=\"mstView('movie','{code}');return false;\">{title}</a></span></td>"
        f"<td>{open_date}</td>"
        "<td>1,234,567,890</td>"
        "</tr>"
    )


def _ranking_block(heading: str, rows: List[Tuple[int, str, int, str]]) -> str:
    body = "".join(_ranking_row(*row) for row in rows)
    return (
        "<div class=\"rst_tbl\">"
        f"<h4>{heading}</h4>"
        "<table class=\"tbl_comm\"><thead><tr><th>순위</th><th>영화명</th><th>개봉일</th><th>매출액</th></tr></thead>"
        f"<tbody>{body}</tbody></table>"
        "</div>"
    )


BOX_OFFICE_HTML = (
    "<html><body><div class=\"rst_sch\">"
    + _ranking_block(
        "2022년 11월 18일(금)",
        [
            (1, "블랙 팬서: 와칸다 포에버", 20226254, "2022-11-09"),
            (2, "압꾸정", 20227890, "2022-11-30"),
            (3, "올빼미", 20228797, "2022-11-23"),
        ],
    )
    + _ranking_block(
        "2022년 11월 19일(토)",
        [
            (1, "블랙 팬서: 와칸다 포에버", 20226254, "2022-11-09"),
            (2, "올빼미", 20228797, "2022-11-23"),
        ],
    )
    + _ranking_block(
        "2022년 11월 20일(일)",
        [
            (1, "블랙 팬서: 와칸다 포에버", 20226254, "2022-11-09"),
            (2, "올빼미", 20228797, "2022-11-23"),
            (3, "압꾸정", 20227890, "2022-11-30"),
            (4, "데시벨", 20224666, "2022-11-16"),
        ],
    )
    + "</div></body></html>"
)

EMPTY_BOX_OFFICE_HTML = "<html><body><div class=\"rst_sch\"></div></body></html>"


SEARCH_HTML = """
<html><body>
<table class="tbl3">
  <thead><tr><th>영화명</th><th>영화명(영문)</th><th>제작연도</th><th>제작국가</th>
  <th>유형</th><th>장르</th><th>제작상태</th><th>영화코드</th></tr></thead>
  <tbody>
    <tr>
      <td title="블랙 팬서: 와칸다 포에버"><a href="#">블랙 팬서: 와칸다 포에버</a></td>
      <td>Black Panther: Wakanda Forever</td><td>2022</td><td>미국</td>
      <td>장편</td><td>액션</td><td>개봉</td><td>20226254</td>
    </tr>
    <tr><td colspan="8">검색된 데이터가 없습니다.</td></tr>
    <tr>
      <td title="올빼미"><a href="#">올빼미</a></td>
      <td>The Night Owl</td><td>2022</td><td>한국</td>
      <td>장편</td><td>스릴러</td><td>개봉</td><td> 20228797 </td>
    </tr>
  </tbody>
</table>
</body></html>
"""


DETAIL_HTML = """
<html><body>
<div class="hd_layer">
  <a class="fl thumb" href="/common/mast/movie/2022/11/5fc3cbc27da64a1983c9abc90599d185.jpg">
    <img src="/common/mast/movie/2022/11/thumb_x192/thn_5fc3cbc27da64a1983c9abc90599d185.jpg" alt="">
  </a>
</div>
<div class="info2">
  <strong class="tit_info">포스터</strong>
  <ul>
    <li><img src="/common/mast/movie/2022/11/thumb_x150/thn_5fc3cbc27da64a1983c9abc90599d185.jpg"></li>
    <li><img src="/common/mast/movie/2022/10/thumb_x150/thn_0a1b2c3d4e5f.jpg"></li>
  </ul>
</div>
<div class="info2">
  <strong class="tit_info">스틸컷</strong>
  <ul>
    <li><img src="/common/mast/movie/2022/11/thumb_x289/thn_still0001.jpg"></li>
    <li><img src="/common/mast/movie/2022/11/thumb_x289/thn_still0002.jpg"></li>
    <li><img src="/common/mast/movie/2022/11/thumb_x289/thn_still0003.jpg"></li>
  </ul>
</div>
<div class="info2">
  <strong class="tit_info">시놉시스</strong>
  <p class="desc_info">
    “와칸다를 지켜라!” 거대한 두 세계의 충돌, 아쿠아맨 이후 최대 스케일의 전쟁이 시작된다.
  </p>
</div>
</body></html>
"""

DETAIL_WITHOUT_SYNOPSIS_HTML = """
<html><body>
<div class="info2"><strong>포스터</strong><img src="/common/mast/movie/2022/11/thumb_x150/thn_a.jpg"></div>
<div class="info2"><strong>스틸컷</strong></div>
<div class="info2"><p>no heading here</p></div>
</body></html>
"""

ACTOR_LIST_JSON = """
[
  {"peopleNm": "레티티아 라이트", "cast": "슈리", "actorGb": "1", "peopleCd": "10056470"},
  {"peopleNm": "안젤라 바셋", "cast": "라몬다", "actorGb": "2"},
  {"peopleNm": "마이클 B. 조던", "cast": "킬몽거", "actorGb": "3"},
  {"peopleNm": "도로시 스틸", "cast": "", "actorGb": "4"},
  {"peopleNm": "엑스트라", "cast": "시민", "actorGb": "5"},
  {"peopleNm": "이름만", "actorGb": ""}
]
"""


class FakeHttpClient:
    """Stand-in for HttpClient that serves canned bodies and records every call."""

    def __init__(self, responses: Optional[Dict[str, str]] = None, error: Optional[Exception] = None) -> None:
        self.responses = dict(responses or {})
        self.error = error
        self.calls: List[Tuple[str, str, List[Tuple[str, str]]]] = []

    def _respond(self, kind: str, url: str, fields) -> str:
        self.calls.append((kind, url, list(fields)))
        if self.error is not None:
            raise self.error
        for path, body in self.responses.items():
            if url.endswith(path):
                return body
        raise AssertionError(f"Unexpected request to {url}")

    def post(self, url, fields, **kwargs):
        return self._respond("post", url, fields)

    def post_json(self, url, fields, **kwargs):
        return self._respond("post_json", url, fields)

    def calls_to(self, path: str) -> List[Tuple[str, str, List[Tuple[str, str]]]]:
        return [call for call in self.calls if call[1].endswith(path)]


@pytest.fixture
def settings():
    return KobisSettings(base_url=BASE_URL, timeout=5, max_retries=0, detail_cache_size=0)


@pytest.fixture
def fake_http():
    return FakeHttpClient(
        {
            DAILY_BOX_OFFICE_PATH: BOX_OFFICE_HTML,
            SEARCH_PATH: SEARCH_HTML,
            DETAIL_PATH: DETAIL_HTML,
            ACTOR_LIST_PATH: ACTOR_LIST_JSON,
        }
    )


@pytest.fixture
def scraper(settings, fake_http):
    return KobisScraper(settings=settings, http=fake_http)
