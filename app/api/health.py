"""
健康检查接口：探活 + 数据库状态
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.engine import get_db

router = APIRouter(tags=["健康检查"])
log = structlog.get_logger()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """健康检查：校验数据库连接"""
    status = {"status": "ok", "database": "ok"}

    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        status["database"] = "error"
        status["status"] = "degraded"
        log.error("数据库健康检查失败", error=str(e))

    return status
