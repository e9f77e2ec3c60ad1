# serpent

Snake games for a POSIX terminal, drawn with ANSI cursor movement. There are
five commands, and each one adds a little more to the game.

## Installation

    pip install .

## Commands

| Command | What it does | Options |
| --- | --- | --- |
| `serpent-prototype` | Clears the screen and asks for an X and a Y coordinate from 1 to 40. It asks again after a value outside that range. Then it moves a one-cell snake to the right. | `--steps N`: moves to make (default 10) |
| `serpent-straight` | Asks for the starting X and Y, from 1 to 40. A ten-cell snake then moves right until you press `a`. | `--pause SECONDS` (default 0.1) |
| `serpent-steering` | Shows the rules, waits, then starts the snake at (20, 20) heading right. Steer with `z` (up), `q` (left), `s` (down) and `d` (right). A key that would turn the snake back on itself, or any other key, is ignored. Press `a` to quit. | `--pause SECONDS` (default 0.09), `--intro-pause SECONDS` (default 3) |
| `serpent-walls` | Counts down, then plays on an 80×40 walled board with four random 5×5 blocks. The game ends when the snake hits a wall or its own body, or when you press `a`. | `--pause SECONDS` (default 0.3), `--intro-seconds N` (default 3) |
| `serpent-apples` | The border has a hole in the middle of each side, and a snake that goes through one comes out on the opposite side. Apples (`6`) appear on free cells. Each one eaten makes the snake one cell longer and 0.01 s faster. Eating ten wins the game. The game also ends on a crash or on `a`. | `--intro-seconds N` (default 3) |

The interactive games (`serpent-straight` and the three after it) switch the
terminal to unbuffered input without echo while they run. The previous
settings come back when the game ends. Each game clears the screen when it
finishes.

## Using it as a library

The pieces can be used from code as well:

- `serpent.terminal.Screen` writes characters at given coordinates to any text stream.
- `serpent.terminal.Keyboard` is a context manager that reads keys without blocking.
- `serpent.direction.Direction` and `resolve_key` hold the steering rules.
- `serpent.apples.AppleGame` advances one tick for each call to `step`, which returns an `Outcome` (`PLAYING`, `QUIT`, `CRASHED` or `WON`).

Example:

    import io, random
    from serpent.terminal import Screen
    from serpent.apples import AppleGame

    game = AppleGame(Screen(io.StringIO()), random.Random(1))
    outcome = game.step("d")

## What it does not do

- Keyboard input relies on `termios` and `select` on standard input, so the games need a POSIX terminal.
- Scores are not shown during play and are not saved between games.
- The board size is fixed. It is not adapted to the size of the terminal.