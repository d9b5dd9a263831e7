import sys
import time
import traceback
from .config import APP_CONFIG
from .utils import logger
from .net.client import LottoApiClient
from .core.collector import DrawCollector
from .core.generator import generate_recommendations
from .report import render_report

def exception_hook(exctype, value, traceback_obj):
    """글로벌 예외 처리"""
    traceback_str = ''.join(traceback.format_tb(traceback_obj))
    logger.critical(f"Uncaught exception:\n{exctype.__name__}: {value}\n\n{traceback_str}")
    sys.__excepthook__(exctype, value, traceback_obj)

def run(client: LottoApiClient) -> str:
    """수집 -> 추천 -> 리포트 문자열"""
    start_time = time.monotonic()
    table, total_draws = DrawCollector(client.fetch_draw).collect()
    elapsed = time.monotonic() - start_time

    logger.info(f"Analyzed {total_draws} draws in {elapsed:.0f}s, generating recommendations")
    recommendations = generate_recommendations(table)
    return render_report(recommendations, table, elapsed)

def main():
    """애플리케이션 진입점"""
    sys.excepthook = exception_hook

    logger.info(f"Starting {APP_CONFIG['APP_NAME']} v{APP_CONFIG['VERSION']}")
    logger.info("Fetching winning numbers from the official API; this may take a while")

    with LottoApiClient() as client:
        report = run(client)

    print()
    print(report)
    return 0

if __name__ == '__main__':
    sys.exit(main())
