from fastapi import Request

from ..i18n.context import I18nContext


def get_i18n(request: Request) -> I18nContext:
    return request.app.state.i18n
