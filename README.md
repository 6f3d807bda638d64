# sigtalk

A tiny message channel between two processes on the same POSIX machine that
uses nothing but the user signals. Each byte goes over as eight signals,
least significant bit first: `SIGUSR1` carries a 0 bit, `SIGUSR2` carries a
1 bit. A zero byte ends the message, and the server then prints what it
collected on a line of its own.

## Installation

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Usage

Start the server in one terminal. It prints its process id and waits for
signals until it is interrupted:

```
$ sigtalk-server
Server PID: 41234
```

From another terminal, send a message to that process id:

```
$ sigtalk-client 41234 "hello there"

Message sent successfuly!
```

The server then prints `hello there`. Text is sent as UTF-8; on the
receiving side bytes that are not valid UTF-8 are shown as replacement
characters. An empty message is printed as `(null)`.

The client expects exactly two arguments, the server's process id and the
message, and otherwise prints `USAGE: <program> <server pid> <message>` and
exits with status 1. The process id is read like C's `atoi`: leading
whitespace and one sign are accepted and reading stops at the first
non-digit. If a signal cannot be delivered, the client prints
`ERROR: could not send SIGUSR1 to PID <pid>` (or `SIGUSR2`) and exits with
status 1. The client waits 0.5 ms after each signal.

Both commands can also be started with `python -m sigtalk.server` and
`python -m sigtalk.client`.

## Library

- `sigtalk.protocol`
  - `encode_byte(value)` returns the eight bits of a byte (0..255), least
    significant first.
  - `encode_message(message)` returns an iterator over the bits of a `str`
    (encoded as UTF-8) or bytes-like message, followed by the terminating
    zero byte. A message containing a NUL byte raises `ValueError`.
  - `signal_for_bit(bit)` and `bit_for_signal(signum)` map between bits and
    `SIGUSR1`/`SIGUSR2`; anything else raises `ValueError`.
  - `MessageDecoder` rebuilds messages: `feed(bit)` returns the message as
    `bytes` once its terminator is complete and `None` before that;
    `reset()` drops any partial byte and message.
- `sigtalk.client`
  - `send_bit(pid, bit, delay)` sends one signal and sleeps `delay` seconds.
  - `send_message(pid, message, delay)` sends a whole message with its
    terminator. Both raise `ClientError` when a signal cannot be sent;
    `delay` defaults to `DEFAULT_DELAY` (0.0005 s).
  - `main(argv)` is the `sigtalk-client` command.
- `sigtalk.server`
  - `Server(output=None)` decodes bits through its `decoder` and prints each
    completed message to `output` (standard output by default).
    `install()` registers it as the handler of both signals,
    `handle_signal(signum, frame)` is that handler, and `serve_forever()`
    waits for signals.
  - `main(argv)` is the `sigtalk-server` command.
- `sigtalk.printf`
  - `cformat(fmt, *args)` returns the formatted text and
    `printf(fmt, *args, file=None)` writes it and returns its length. The
    conversions are `%c %s %p %d %i %u %x %X %%`, with C's 32-bit integer
    wrapping; `%s` of `None` gives `(null)` and `%p` of `None` or 0 gives
    `(nil)`. An unknown conversion prints nothing, and a missing argument
    raises `TypeError`.
- `sigtalk.chartype` has `atoi`, `itoa` (32-bit range, `OverflowError`
  outside it), the ASCII classifiers `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, and `to_upper` / `to_lower`, which return the same
  type (int code or one-character string) they are given.
- `sigtalk.textutil` has `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `memcmp`, `strchr`, `strrchr`, `strjoin` and `strmapi`. The searching
  functions return an index, or `None` when nothing is found.

## Limitations

- Only POSIX systems are supported: the package needs `SIGUSR1`, `SIGUSR2`
  and `signal.pause`.
- Delivery is not acknowledged. The client only paces its signals with a
  fixed delay, so a busy server may lose bits, and the server cannot tell
  messages from different clients apart.
- Messages may not contain NUL bytes.

## Tests

```
pip install .[test]
pytest
```