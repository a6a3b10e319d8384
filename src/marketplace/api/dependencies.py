"""Request-scoped accessors for objects built once at startup."""

from fastapi import Request

from marketplace.config import AppConfig
from marketplace.delivery.routing.port import RoutingProvider


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_routing_provider(request: Request) -> RoutingProvider:
    return request.app.state.routing_provider
