import time
from typing import Any, Dict, Optional
import requests
from lottorec.utils import logger
from lottorec.config import APP_CONFIG, DHLOTTERY_API_URL, REQUEST_HEADERS, WINNING_NUMBER_FIELDS

# ============================================================
# API 클라이언트 (requests.Session 기반, 순차 동기 호출)
# ============================================================
class LottoApiClient:
    """동행복권 API에서 회차별 당첨 정보를 가져오는 클라이언트

    fetch_draw()는 성공 시 기존(drwtNo1~6) 형식의 dict를,
    네트워크 오류/파싱 오류/데이터 없음이면 None을 반환한다.
    """

    def __init__(self, timeout: Optional[float] = None, delay: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout if timeout is not None else APP_CONFIG['API_TIMEOUT']
        self.delay = delay if delay is not None else APP_CONFIG['REQUEST_DELAY']
        self.session = session or requests.Session()
        self.session.headers.update(REQUEST_HEADERS)
        self._request_count = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.session.close()

    def _convert_new_format_to_old(self, new_data: dict) -> Optional[Dict[str, Any]]:
        """새 API 응답 형식을 기존 형식으로 변환"""
        # 새 API 형식:
        # { "data": { "list": [{ "ltEpsd": 1205, "tm1WnNo": 1, ... }] } }
        # 기존 형식:
        # { "returnValue": "success", "drwNo": 1205, "drwtNo1": 1, ... }
        data = new_data.get('data')
        data_list = data.get('list') if isinstance(data, dict) else None
        if not data_list:
            return None

        if not isinstance(data_list, list) or not isinstance(data_list[0], dict):
            logger.error(f"Malformed new-format payload: {str(data_list)[:200]}")
            return None

        item = data_list[0]
        converted = {
            'returnValue': 'success',
            'drwNo': item.get('ltEpsd'),
            'drwNoDate': self._format_date(str(item.get('ltRflYmd', ''))),
            'bnusNo': item.get('bnsWnNo'),
        }
        for i, field in enumerate(WINNING_NUMBER_FIELDS, start=1):
            converted[field] = item.get(f'tm{i}WnNo')
        return converted

    def _format_date(self, date_str: str) -> str:
        """날짜 형식 변환: '20260103' -> '2026-01-03'"""
        if len(date_str) == 8:
            return f"{date_str[:4]}-{date_str[4:6]}-{date_str[6:8]}"
        return date_str

    def fetch_draw(self, draw_no: int) -> Optional[Dict[str, Any]]:
        """단일 회차 정보 요청 (재시도 없음)"""
        # 다수의 요청 시 약간의 딜레이 (서버 부하 방지)
        if self._request_count > 0 and self.delay > 0:
            time.sleep(self.delay)
        self._request_count += 1

        url = DHLOTTERY_API_URL.format(draw_no)
        logger.debug(f"Requesting draw #{draw_no}")

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Network error for #{draw_no}: {e}")
            return None
        except ValueError as e:
            logger.error(f"JSON parse error for #{draw_no}: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"Unexpected response type for #{draw_no}: {type(data).__name__}")
            return None

        if data.get('returnValue') == 'fail':
            logger.info(f"No data for draw #{draw_no} (returnValue: fail)")
            return None

        if 'data' in data and 'returnValue' not in data:
            data = self._convert_new_format_to_old(data)
            if data is None:
                logger.info(f"No data for draw #{draw_no} (empty or malformed list)")
                return None

        if not data.get('drwNo'):
            logger.warning(f"Draw #{draw_no} response has no draw number")
            return None

        logger.debug(f"Successfully fetched draw #{draw_no}")
        return data
