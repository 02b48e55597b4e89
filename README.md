# craftserve

Building blocks for a game server that speaks the Minecraft Java network
protocol (1.21.4, protocol 769). The package holds the pieces such a server
is made from: the packet buffer, chat colour handling, AES/CFB8 stream
encryption, session authentication helpers, a millisecond task scheduler,
palette and section encoding, block and biome registries, and a simple
in-memory world.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## A quick tour

Reading and writing protocol values goes through `ConnBuffer`. Reads past
the end of the data yield zero bytes.

```python
from craftserve.buffer import ConnBuffer

buf = ConnBuffer()
buf.push_varint(300)
buf.push_text("hello")

reader = ConnBuffer(buf.data)
assert reader.pull_varint() == 300
assert reader.pull_text() == "hello"
```

Chat text written with `&` colour codes can be turned into section-sign
codes for clients, or into ANSI colours for a terminal:

```python
from craftserve.chat import ChatColor, translate, translate_console

translate("&aGreen &lbold")          # "§aGreen §lbold"
print(translate_console("&cSomething went wrong"))
ChatColor.GOLD.on("shiny")           # "§6shiny§r"
```

Structured chat messages are built as a tree and rendered from its root,
either as JSON or as legacy section-sign text:

```python
from craftserve.chat import ChatColor
from craftserve.messages import Message

msg = Message("Hello ").set_color(ChatColor.GOLD)
msg.add("world").set_bold(True)
print(msg.as_json())   # {"text":"Hello ","color":"gold","extra":[{"text":"world","bold":true}]}
print(msg.as_text())
```

Events are published and subscribed through a `Watcher`. A handler is only
called when it can take the published arguments. `sub_as` subscribes a
function under the class its first parameter is annotated with, and
`pub_as` publishes under the class of its first argument:

```python
from craftserve.watcher import Watcher

watcher = Watcher()
handler = watcher.sub("join", lambda name: print(f"{name} joined"))
watcher.pub("join", "Steve")
handler.unsub()
```

Repeating and delayed work runs on a `Tasking` scheduler whose argument is
milliseconds per tick. `every` runs its function at once and then every
period; a task that raises is cancelled and its error printed.

```python
from craftserve.tasking import Tasking

tasking = Tasking(50)          # 50 ms per tick, 20 ticks per second
tasking.load()
tasking.every(20, lambda task: print("once a second"))
tasking.after(100, lambda task: tasking.kill())
```

Commands are registered by name and looked up ignoring case:

```python
from craftserve.commands import CommandManager, parse_command

manager = CommandManager()
manager.register("tp", lambda sender, params: print(params))
name, args = parse_command("TP 1 64 2")
manager.search(name).evaluate(None, args)   # prints ['1', '64', '2']
```

## Modules

- `craftserve.buffer` – `ConnBuffer`: booleans, bytes, 16/24/32/64-bit
  integers, floats, VarInt/VarLong, length-prefixed strings and byte
  arrays, UUIDs and packed block positions.
- `craftserve.chat`, `craftserve.messages` – colour codes, `&` translation,
  console colouring, and JSON chat components.
- `craftserve.logs` – `Logging`, a named logger writing timestamped,
  coloured lines for the `LogLevel`s it is set to show (`info`, `warn`,
  `fail`, `data` and their `...f` formatting forms).
- `craftserve.funcs` – `convert_to_string`, `attempt`, Java's string hash
  code, `java_sha256_hash_long`, `default_world_hashed_seed` and
  `format_time` (seconds as words).
- `craftserve.uuids` – UUIDs to and from text and signed 64-bit halves.
- `craftserve.game` – `GameMode`, `Difficulty`, `Dimension`, `LevelType`,
  `MinecraftVersion`, `Material`, positions, rotations and `Profile`.
- `craftserve.packetstate` – `PacketState` and its `next` transition.
- `craftserve.compact` – `Compacter`, fixed-width values packed in 64-bit
  words.
- `craftserve.masking` – `has_flag` and `set_flag` for bit flags.
- `craftserve.watcher` – the publish/subscribe hub shown above.
- `craftserve.commands` – `Command`, `SimpleCommand`, `CommandManager`,
  `parse_command`.
- `craftserve.clientdata` – player abilities, teleport relativity, skin
  parts and other small client structures with `push`/`pull`.
- `craftserve.plugin` – plugin channel messages (`Brand`, `DebugPaths`,
  `DebugNeighbors`) and `get_message_for_channel`.
- `craftserve.cfb8` – `CFB8`, AES in 8-bit cipher feedback mode, and
  `new_encrypt_and_decrypt`.
- `craftserve.connection` – `Connection`, wrapping a socket with
  encryption, zlib compression and packet framing. `send_packet` takes any
  object with a `packet_id` and a `push(writer, conn)` method.
- `craftserve.auth` – the server's RSA key pair (`new_crypt`, `encrypt`,
  `decrypt`), `minecraft_hash`, `auth_url`, `parse_auth` and `fetch_auth`,
  which asks the session server whether a player joined.
- `craftserve.nbt` – NBT tag value types, including `NbtCompound`.
- `craftserve.level` – `Level`, `Chunk`, `Slice` and `Block`, an in-memory
  world of 14-bit block ids, and `gen_super_flat`.
- `craftserve.registry` – `BlockRegistry` and `BiomeRegistry`, with
  `load_block_registry` and `load_biome_registry` to read them from JSON
  data files (by default under `registry/`).
- `craftserve.palette` – section palettes and their wire encoding, and
  counters of non-air blocks in packed data.
- `craftserve.chunksection` – `ChunkSection`, four-bit blocks packed two
  per byte.
- `craftserve.hexfile` – `parse_hex_bytes` and `read_hex_file` for
  space-separated hex dumps.

## What it does not do

craftserve is a library, not a runnable server. It has no command to start
one, does not listen for connections, has no packet classes or handlers for
the protocol states, does not read server configuration, generate terrain
or load region files, and ships no block or biome data files: the
registries must be pointed at such files.