# sigtalk

A tiny messaging pair for POSIX systems. A server process waits for
signals, and a client spells a text message out to it one bit at a time:
`SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit, most significant
bit first. The message is sent as UTF-8 bytes and a zero byte ends it.

The server sends `SIGUSR2` back after every bit it receives, and the
client waits for that before it sends the next bit. Once the terminating
zero byte arrives, the server prints how many signals it received and
from which process, and sends `SIGUSR1` to tell the client the message is
complete.

The server waits with `signal.sigwaitinfo`, so it needs a system that
provides it, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id:

```
$ sigtalk-server
PID: 4242

```

In another terminal, send it a message:

```
$ sigtalk-client 4242 "hello there"
client pid: 4343
Text currently sending.. 
96 signal sent successfully!
```

The server prints the text as it is decoded, followed by a summary line
giving the number of signals (eight per byte, the terminating zero byte
included):

```
hello there
96 signal received from client PID: 4343
```

Stop the server with Ctrl-C.

If the client is started with the wrong number of arguments it prints the
following and exits with status 1:

```
Usage: client <server_pid> <text to send>
```

If the server cannot be signalled, the client prints
`Client: unexpected error.` and exits with status 1. A message may not
contain a zero byte.

## Library use

The bit encoding and the decoding state machine in `sigtalk.protocol`
work without signals:

```python
from sigtalk.protocol import MessageDecoder, encode_message

decoder = MessageDecoder()
for bit in encode_message("hi"):
    done = decoder.feed(1234, bit)
    if done is not None:
        print(done.sender, done.text, done.signals)
```

`MessageDecoder.feed` returns a `CompletedMessage` when a message ends and
`None` otherwise; bits from a different sender discard a partial message.
`byte_to_bits` splits one byte into its eight bits.

`sigtalk.client.send_text(text, server_pid)` sends a message and returns
the number of acknowledged signals, raising `SendError` on failure.
`sigtalk.server.Server` decodes incoming signals: `handle(signum, sender)`
processes one signal and `serve_forever()` runs the receive loop.

Other modules:

- `sigtalk.fmt` — a small printf-style formatter (`%c %s %p %d %i %u %x %X %%`)
  with `format_message`, `printf`, `format_hex`, `format_pointer`,
  `format_string` and `format_unsigned`.
- `sigtalk.numconv` — `atoi`, `itoa` and `uitoa` with 32-bit wrap-around.
- `sigtalk.strtools` — string helpers with C library semantics (`split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `memcmp`, `strchr`,
  `strrchr`, `strjoin`, `strmapi`).
- `sigtalk.charclass` — ASCII classification and case mapping (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`).

## Running the tests

```
pip install ".[test]"
pytest
```