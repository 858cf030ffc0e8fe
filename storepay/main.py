import logging
from fastapi import FastAPI

from storepay.core.config import settings
from storepay.api.routes import stores, employees, weekly_templates, schedule_exceptions, payroll

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="StorePay API", version="0.1.0")

app.include_router(stores.router, prefix="/api/v1")
app.include_router(employees.router, prefix="/api/v1")
app.include_router(weekly_templates.router, prefix="/api/v1")
app.include_router(schedule_exceptions.router, prefix="/api/v1")
app.include_router(payroll.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
