from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from namespace_api import rpc
from namespace_api.errors import ShapeMismatch, TransportFailure, UnsupportedChain
from namespace_api.logging_config import setup_logging
from namespace_api.routers import currencies_router, namespaces_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = rpc.get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    await rpc.get_client()
    yield
    await rpc.close_client()


app = FastAPI(lifespan=lifespan)
app.include_router(namespaces_router)
app.include_router(currencies_router)


@app.exception_handler(UnsupportedChain)
async def unsupported_chain_handler(_: Request, exc: UnsupportedChain) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(TransportFailure)
async def transport_failure_handler(_: Request, exc: TransportFailure) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": f"Currency daemon unavailable: {exc}"},
    )


@app.exception_handler(ShapeMismatch)
async def shape_mismatch_handler(_: Request, exc: ShapeMismatch) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Currency daemon returned an unexpected response."},
    )


@app.get("/")
def read_root() -> dict[str, str]:
    return {"status": "ok"}
