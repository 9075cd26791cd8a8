import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as _TestServer

from flightlog.airports import AirportServiceClient


def _app():
    async def by_iata(request):
        code = request.match_info["code"]
        if code == "FRA":
            return web.json_response({"id": 1, "iata": "FRA", "icao": "EDDF", "name": "Frankfurt"})
        if code == "BAD":
            return web.json_response({"iata": "BAD"})
        if code == "ERR":
            return web.Response(status=500)
        return web.Response(status=404)

    app = web.Application()
    app.router.add_get("/airports/iata/{code}", by_iata)
    return app


async def _lookup_all(codes):
    server = _TestServer(_app())
    await server.start_server()
    try:
        async with AirportServiceClient(base_url=str(server.make_url("/")), api_key=None) as client:
            return [await client(code) for code in codes]
    finally:
        await server.close()


def test_client_lookups():
    fra, unknown, bad, err, empty = asyncio.run(_lookup_all(["fra", "XXX", "BAD", "ERR", "  "]))
    assert fra.id == 1
    assert fra.icao == "EDDF"
    assert unknown is None
    assert bad is None
    assert err is None
    assert empty is None


def test_client_requires_context_manager():
    client = AirportServiceClient(base_url="http://localhost")
    with pytest.raises(RuntimeError):
        asyncio.run(client.get_from_iata("FRA"))
