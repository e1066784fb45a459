"""ad_dashboard REST endpoints.

GET /dashboard/stats                          — cached aggregate + timing
GET /dashboard/users                          — page of users + counts
GET /dashboard/users/{user_id}                — user, balance, withdrawals
GET /dashboard/withdrawals                    — N most recent
GET /dashboard/withdrawals/status/{status}    — recent, filtered by status
GET /dashboard/balance-summary                — platform total + status counts
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.ad_common.response import ApiResponse, success_response
from src.ad_dashboard.application.service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(request: Request) -> DashboardService:
    return request.app.state.container.dashboard


Service = Annotated[DashboardService, Depends(get_dashboard_service)]


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.get("/stats")
async def get_stats(request: Request, service: Service) -> ApiResponse:
    result = await service.get_stats()
    return success_response(result.model_dump(), _request_id(request))


@router.get("/users")
async def list_users(
    request: Request,
    service: Service,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, description="Clamped to 100"),
) -> ApiResponse:
    result = await service.list_users(page, limit)
    return success_response(result.model_dump(), _request_id(request))


@router.get("/users/{user_id}")
async def get_user_detail(user_id: str, request: Request, service: Service) -> ApiResponse:
    result = await service.get_user_detail(user_id)
    return success_response(result.model_dump(), _request_id(request))


@router.get("/withdrawals")
async def recent_withdrawals(
    request: Request,
    service: Service,
    limit: int = Query(100, ge=1, description="Clamped to 500"),
) -> ApiResponse:
    result = await service.recent_withdrawals(limit)
    return success_response(result.model_dump(), _request_id(request))


@router.get("/withdrawals/status/{status}")
async def withdrawals_by_status(status: str, request: Request, service: Service) -> ApiResponse:
    result = await service.withdrawals_by_status(status)
    return success_response(result.model_dump(), _request_id(request))


@router.get("/balance-summary")
async def balance_summary(request: Request, service: Service) -> ApiResponse:
    result = await service.balance_summary()
    return success_response(result.model_dump(), _request_id(request))
