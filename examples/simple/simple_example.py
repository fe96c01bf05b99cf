"""Simple logkit example with CLI-configurable settings via chz."""

from __future__ import annotations

import logging

import chz

from logkit import (
    GRPCLogger,
    KitLogger,
    LogConfig,
    get_logger,
    log_context,
    with_fields,
)


@chz.chz
class SimpleAppConfig:
    service_name: str = "orders"
    service_version: str | None = "1.0.0"
    environment: str | None = "prod"
    log_level: str = "DEBUG"


def run_example(settings: SimpleAppConfig) -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s - %(message)s")
    cfg = LogConfig(
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
        level=settings.log_level,
    )
    log = get_logger(__name__, cfg)

    with log_context(request_id="req-1234", user_id="user-5"):
        checkout = with_fields(log, {"order_id": "ord-99"})
        checkout.info("checkout started")
        checkout.error("payment declined: %s", "insufficient funds")

    # hand the same logger to libraries with their own calling conventions
    grpc = GRPCLogger(log)
    if grpc.v(0):
        grpc.infof("channel %s ready", "orders-api")
    KitLogger(log).log("level", "warn", "msg", "slow query", "took_ms", 812)
    logging.shutdown()


def main(settings: SimpleAppConfig) -> None:
    run_example(settings)


if __name__ == "__main__":
    chz.entrypoint(main)
