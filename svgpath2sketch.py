#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
SVG Path Interpreter

This module interprets an SVG path definition (the d attribute of a <path>
element) and returns the equivalent list of sketch drawing instructions.
The string is scanned one character at a time by a small state machine:
numbers are buffered until a separator flushes them, and every command
letter dispatches the previous command against the numbers collected for it.

Every instruction is a (command, verts) tuple with absolute coordinates and
the y axis flipped, because the sketch API counts y upwards:

    ('M', [(x, y)])                          move the pointer
    ('L', [(x, y)])                          line
    ('H', [x]) / ('V', [y])                  horizontal / vertical line
    ('Q', [(cx, cy), (x, y)])                quadratic Bezier
    ('C', [(c1x, c1y), (c2x, c2y), (x, y)])  cubic Bezier
    ('Z', [])                                close the contour

Smooth curves (S, T) and elliptical arcs (A) move the cursor but are not
drawn yet.
"""

import enum
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

WHITESPACE = set(' \t\r\n')
NUMBER_CHARS = set('0123456789.')

Instruction = namedtuple('Instruction', ['command', 'verts'])


class PathParseError(ValueError):
    """A numeric token of a path definition is not a valid float."""

    def __init__(self, token, offset, pathdef):
        self.token = token
        self.offset = offset
        self.pathdef = pathdef
        super().__init__(
            "Invalid number %r at offset %d in path: %s" % (token, offset, pathdef))


class Command(enum.Enum):
    """The path commands, valued by (letter, arity)."""
    NOT_SET = ('', 0)
    MOVE_ABSOLUTE = ('M', 2)
    MOVE_RELATIVE = ('m', 2)
    LINE_ABSOLUTE = ('L', 2)
    LINE_RELATIVE = ('l', 2)
    HORIZONTAL_LINE_ABSOLUTE = ('H', 1)
    HORIZONTAL_LINE_RELATIVE = ('h', 1)
    VERTICAL_LINE_ABSOLUTE = ('V', 1)
    VERTICAL_LINE_RELATIVE = ('v', 1)
    QUADRATIC_ABSOLUTE = ('Q', 4)
    QUADRATIC_RELATIVE = ('q', 4)
    SMOOTH_QUADRATIC_ABSOLUTE = ('T', 2)
    SMOOTH_QUADRATIC_RELATIVE = ('t', 2)
    CUBIC_ABSOLUTE = ('C', 6)
    CUBIC_RELATIVE = ('c', 6)
    SMOOTH_CUBIC_ABSOLUTE = ('S', 4)
    SMOOTH_CUBIC_RELATIVE = ('s', 4)
    ARC_ABSOLUTE = ('A', 7)
    ARC_RELATIVE = ('a', 7)
    CLOSE_ABSOLUTE = ('Z', 0)
    CLOSE_RELATIVE = ('z', 0)

    @property
    def letter(self):
        return self.value[0]

    @property
    def arity(self):
        return self.value[1]

    @property
    def kind(self):
        return self.letter.upper()

    @property
    def relative(self):
        return self.letter.islower()


COMMANDS = {command.letter: command for command in Command if command.letter}


class InterpreterState:
    """
    Everything needed while scanning one path definition.

    values collects the numbers seen since the last command letter, buffer
    holds the text of the number being read (offset is where it started) and
    flushed records that whitespace already pushed that number, so the next
    command letter does not push it again. It is a guard only: whitespace
    leaves the buffer empty and new text clears the flag, so a skipped flush
    would have been a no-op anyway. Only cursor outlives a command.
    """

    def __init__(self, command=Command.NOT_SET, cursor=0+0j):
        self.command = command
        self.values = []
        self.buffer = ''
        self.offset = 0
        self.flushed = False
        self.cursor = cursor

    def __repr__(self):
        return ('InterpreterState(command=%s, values=%r, buffer=%r, cursor=%r)'
                % (self.command.name, self.values, self.buffer, self.cursor))

# -----------------------------------------------------------
# Instruction emitters, one per command kind.
# Each takes the cursor at the start of the tuple and returns the new one.
# -----------------------------------------------------------
def _flip(pos):
    return (pos.real, -pos.imag)

def _point(cursor, x, y, relative):
    pos = complex(x, y)
    return cursor + pos if relative else pos

def _emit_move(cursor, args, relative, out):
    pos = _point(cursor, args[0], args[1], relative)
    out.append(Instruction('M', [_flip(pos)]))
    return pos

def _emit_line(cursor, args, relative, out):
    pos = _point(cursor, args[0], args[1], relative)
    out.append(Instruction('L', [_flip(pos)]))
    return pos

def _emit_horizontal(cursor, args, relative, out):
    x = cursor.real + args[0] if relative else args[0]
    out.append(Instruction('H', [x]))
    return complex(x, cursor.imag)

def _emit_vertical(cursor, args, relative, out):
    y = cursor.imag + args[0] if relative else args[0]
    out.append(Instruction('V', [-y]))
    return complex(cursor.real, y)

def _emit_quadratic(cursor, args, relative, out):
    control = _point(cursor, args[0], args[1], relative)
    end = _point(cursor, args[2], args[3], relative)
    out.append(Instruction('Q', [_flip(control), _flip(end)]))
    return end

def _emit_cubic(cursor, args, relative, out):
    control1 = _point(cursor, args[0], args[1], relative)
    control2 = _point(cursor, args[2], args[3], relative)
    end = _point(cursor, args[4], args[5], relative)
    out.append(Instruction('C', [_flip(control1), _flip(control2), _flip(end)]))
    return end

def _track_end(cursor, args, relative, out):
    # S, T and A are not drawn; their end point is the last pair.
    return _point(cursor, args[-2], args[-1], relative)

EMITTERS = {
    'M': _emit_move,
    'L': _emit_line,
    'H': _emit_horizontal,
    'V': _emit_vertical,
    'Q': _emit_quadratic,
    'C': _emit_cubic,
    'T': _track_end,
    'S': _track_end,
    'A': _track_end,
}

# -----------------------------------------------------------
# State machine
# -----------------------------------------------------------
def _is_partial(buffer):
    """A sign or a decimal point alone is not a number yet."""
    return not buffer.lstrip('-').strip('.')

def _flush(state, pathdef):
    if not state.buffer:
        return
    try:
        value = float(state.buffer)
    except ValueError:
        raise PathParseError(state.buffer, state.offset, pathdef) from None
    state.values.append(value)
    state.buffer = ''

def _buffer(state, char, offset):
    if not state.buffer:
        state.offset = offset
    state.buffer += char
    state.flushed = False

def _dispatch(state, out):
    command = state.command
    if command is Command.NOT_SET:
        return
    if command.kind == 'Z':
        out.append(Instruction('Z', []))
        return
    emit = EMITTERS[command.kind]
    arity = command.arity
    for i in range(0, len(state.values), arity):
        args = state.values[i:i + arity]
        if len(args) < arity:
            # Some exporters truncate the last tuple of a command.
            logger.debug("Dropping truncated %s arguments %r", command.letter, args)
            return
        state.cursor = emit(state.cursor, args, command.relative, out)

def _transition(state, command, pathdef, out):
    if not state.flushed:
        _flush(state, pathdef)
    _dispatch(state, out)
    return InterpreterState(command, state.cursor)

def _run(pathdef):
    out = []
    state = InterpreterState()

    for offset, char in enumerate(pathdef):
        if char in COMMANDS:
            state = _transition(state, COMMANDS[char], pathdef, out)
        elif char in NUMBER_CHARS:
            _buffer(state, char, offset)
        elif char == ',':
            _flush(state, pathdef)
        elif char == '-':
            _flush(state, pathdef)
            _buffer(state, char, offset)
        elif char in WHITESPACE:
            _flush(state, pathdef)
            state.flushed = True

        # Close takes no arguments, so nothing may linger until the next letter.
        if state.command.kind == 'Z' and not _is_partial(state.buffer):
            _flush(state, pathdef)

    _flush(state, pathdef)
    if state.command.kind == 'Z':
        _dispatch(state, out)
    elif state.values and state.command is not Command.NOT_SET:
        # The path was left open (no trailing Z), close it ourselves.
        state = _transition(state, Command.CLOSE_ABSOLUTE, pathdef, out)
        _dispatch(state, out)
    logger.debug("Interpreted %d instructions from path: %s", len(out), pathdef)
    return out, state

def interpret(pathdef):
    """
    Interpret the path definition and return its list of instructions.
    Raises PathParseError when a number cannot be parsed.
    """
    return _run(pathdef)[0]

def final_cursor(pathdef):
    """Return the (x, y) cursor after the path, in SVG coordinates."""
    cursor = _run(pathdef)[1].cursor
    return (cursor.real, cursor.imag)

# -----------------------------------------------------------
# Example usage (for testing the module directly)
# -----------------------------------------------------------
if __name__ == '__main__':
    example_path = (
        "M 100 100 L 200 100 C 250 100 250 200 200 200 "
        "L 100 200 Z "
        "m 300 300 q 25 -50 50 0 h 20 v-20"
    )
    for instruction in interpret(example_path):
        print(instruction)
