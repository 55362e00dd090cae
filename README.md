# tankfield

Building blocks for a small top-down tank arcade game: tanks made of a
body and a barrel sprite, bullets, a tick-based shooting cooldown, a
keyboard-free player model and sprite-atlas loading. It also includes a
viewer for the tiles in a sprite sheet and a minimal websocket game
server.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Tile viewer

```
tankfield-tiles [--spritesheet PATH] [--atlas PATH]
```

This opens a window that lays out every sprite whose name begins with
`tile` in wrapping rows. Each tile is labelled with its name and with the
edge codes of its four sides (north, east, south, west), which describe
how neighbouring tiles match. The sprite sheet defaults to
`../assets/spritesheet/allSprites_default.png` and the atlas to
`../assets/spritesheet/allSprites_default.xml`. Close the window to quit.

## Game server

```
tankfield-server [--name NAME] [--host HOST] [--port PORT]
```

This starts an HTTP server, by default on `localhost:40000`. It accepts
websocket connections at `/ws`, logs each client that connects and then
closes the connection. A request to `/ws` that cannot be upgraded gets a
400 response.

`tankfield.server.GameServer` can also be used from code: `make_app()`
returns the `aiohttp` application, and `await start_http()` starts it in
the background and returns an `AppRunner` to clean up when done.

## Library use

- `tankfield.vector.Vector` is an immutable 2-D position with y growing
  downwards. `Vector.advanced(rotation, distance)` returns the position
  after moving `distance` in the direction the rotation faces (0 is up,
  positive turns clockwise).
- `tankfield.timer.Timer(duration, tps=60)` is a cooldown counted in
  ticks, with `update()`, `is_ready()` and `reset()`.
- `tankfield.bullet.Bullet` moves in a straight line at constant speed;
  `is_inside(width, height)` tells whether it is still within the field.
- `tankfield.tank.Tank` draws a body with a barrel rotated about the
  body's centre; `placements(pos, rotation)` gives where each part is
  centred. `tankfield.tank.new_random_tank(sprites, rng=None)` combines a
  random body with a random barrel.
- `tankfield.spritesheet.SpriteSheet.load(image_path, atlas_path)` loads
  a texture atlas (a PNG sprite sheet plus an XML `TextureAtlas` file).
  `get_sprite(name)` accepts names with or without `.png`, and `names()`
  lists them in atlas order. `parse_sprite_map` and `load_sprite_map`
  read just the XML part.
- `tankfield.player.Player` turns, drives, shoots and swaps tanks on each
  `update(controls)`, where `controls` is a `tankfield.player.Controls`
  snapshot of the input for that tick, so it can be driven without a
  keyboard. Bullets that leave the field are dropped.
- `tankfield.tileviewer.tile_layout(sprites, screen_width)` computes the
  tile viewer's layout as a list of `TilePlacement`s.

## What it does not do

There is no playable game command: the package has no game loop that
reads the keyboard, opens a window and runs a player, and it does not
generate a tiled playfield to drive on. The pieces above are what such a
game would be built from. The game server does not exchange any game
messages with its clients.