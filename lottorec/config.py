# ============================================================
# 상수 정의
# ============================================================
APP_CONFIG = {
    'APP_NAME': 'Lotto 6/45 Number Recommender',
    'VERSION': '1.0',
    'API_TIMEOUT': 10,
    'REQUEST_DELAY': 0.0,         # 회차 요청 간 대기 (초)
    'PROGRESS_INTERVAL': 50,      # N회차마다 진행 상황 로그
    'PROGRESS_HEAD': 5,           # 처음 N회차는 매번 로그
    'RECOMMEND_SETS': 10,
    'NUMBERS_PER_SET': 6,
    'LOG_LEVEL': 'INFO',
}

MIN_NUMBER = 1
MAX_NUMBER = 45
LOTTO_NUMBERS = range(MIN_NUMBER, MAX_NUMBER + 1)

# 당첨번호 필드 (drwtNo1 ~ drwtNo6)
WINNING_NUMBER_FIELDS = tuple(f'drwtNo{i}' for i in range(1, 7))

DHLOTTERY_API_URL = "https://www.dhlottery.co.kr/common.do?method=getLottoNumber&drwNo={}"
DATA_SOURCE_NAME = "동행복권 공식 API"

REQUEST_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    'Referer': 'https://www.dhlottery.co.kr/gameResult.do?method=byWin',
    'Accept': 'application/json, text/javascript, */*; q=0.01',
    'Accept-Language': 'ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7',
    'X-Requested-With': 'XMLHttpRequest',
}
