from aiohttp import web


main_router = web.RouteTableDef()
host_router = web.RouteTableDef()
participant_router = web.RouteTableDef()
