import time

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from app.config.settings import Settings
from app.scanning.scanner import Scanner
from app.schemas.scan import HealthResponse, ScanRequest, ScanResponse, StockAnalysis

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_scanner(request: Request) -> Scanner:
    return request.app.state.scanner


async def _read_scan_request(request: Request) -> ScanRequest:
    # Anything unreadable means "use the default symbol list".
    try:
        body = await request.json()
    except ValueError:
        return ScanRequest()
    if not isinstance(body, dict):
        return ScanRequest()
    try:
        return ScanRequest.model_validate(body)
    except ValidationError:
        return ScanRequest()


@router.get("/health", response_model=HealthResponse)
def health(request: Request, settings: Settings = Depends(get_settings)) -> HealthResponse:
    started_at = request.app.state.started_at
    return HealthResponse(
        server_tag=settings.service_name,
        version=settings.version,
        uptime_seconds=round(time.monotonic() - started_at, 3),
    )


@router.post("/scan", response_model=ScanResponse)
async def scan_endpoint(
    request: Request,
    settings: Settings = Depends(get_settings),
    scanner: Scanner = Depends(get_scanner),
) -> ScanResponse:
    payload = await _read_scan_request(request)
    outcome = await scanner.scan(payload.symbols)
    return ScanResponse(
        success=True,
        results=outcome.results,
        server_tag=settings.server_tag,
        message=outcome.message,
    )


@router.get("/stock/{symbol}", response_model=StockAnalysis)
async def stock_endpoint(symbol: str, scanner: Scanner = Depends(get_scanner)) -> StockAnalysis:
    return await scanner.analyze(symbol)
