import logging

from terahex import Cell, GridSettings, HexGrid, LatLon, route

grid = HexGrid(GridSettings(cell_size=0.25))
zurich = LatLon(lat=47.37, lon=8.54)
bern = LatLon(lat=46.95, lon=7.45)

blocked = {Cell(-3, -2), Cell(-2, -2)}


def passable(c: Cell) -> bool:
    return c not in blocked


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    a = grid.cell_at_latlon(zurich)
    b = grid.cell_at_latlon(bern)
    print("cells:", a, b, "distance:", grid.distance(a, b))
    print("line:", grid.line(a, b))
    print("center of", b, "is", grid.center_latlon(b))
    path, total_cost = route(a, b, passable=passable)
    print("route:", path)
    print("cost:", total_cost)
