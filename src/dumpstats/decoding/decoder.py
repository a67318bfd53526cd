"""
Heap dump stream decoder.

This module turns the tagged event stream written by the VM's heap dumper into
per-class aggregate records. The stream is a serialized mark/push/pop traversal
of the object graph:

- Root announces a traversal root and resets revisit suppression
- Size sets the word size applied to every following Push until changed
- ClassName names the class most recently rooted or pushed
- Push visits an object and attributes the current size to its class
- Pop marks the next Push as a revisit of an already counted object

Decoding is all-or-nothing: any error aborts the pass and no partial mapping
is returned.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Dict, Union

from ..models import AggregateRecord, DecoderState
from ..validation import MalformedTagError
from .reader import DumpReader
from .tags import Tag

logger = logging.getLogger(__name__)

RecordMap = Dict[int, AggregateRecord]


def get_record(records: RecordMap, key: int) -> AggregateRecord:
    """
    Return the record for `key`, inserting an empty one on first reference.

    The returned instance is the one stored in `records`, so updates to it
    persist.
    """
    record = records.get(key)
    if record is None:
        record = records[key] = AggregateRecord(key=key)
    return record


def decode_stream(stream: BinaryIO, encoding: str = "utf-8") -> RecordMap:
    """
    Decode a heap dump stream into per-class aggregate records.

    Args:
        stream: Binary stream positioned at the first tag byte
        encoding: Text encoding for class names

    Returns:
        Mapping of class id to its AggregateRecord

    Raises:
        TruncatedInputError: If the stream ends inside a record payload
        MalformedTagError: If an unknown tag byte is encountered
        InvalidLengthError: If a class name announces a negative length
        OSError: If reading from the stream fails
    """
    reader = DumpReader(stream, encoding=encoding)
    state = DecoderState()
    records: RecordMap = {}

    while True:
        tag_offset = reader.offset
        tag = reader.read_tag()
        if tag is None:
            break

        if tag == Tag.ROOT:
            state.current_id = reader.read_int32()
            state.suppress_next = False

        elif tag == Tag.SIZE:
            state.current_size = reader.read_int32()

        elif tag == Tag.CLASS_NAME:
            name = reader.read_string()
            if not get_record(records, state.current_id).assign_name(name):
                logger.debug(
                    f"Ignoring repeated name '{name}' for class {state.current_id}"
                )

        elif tag == Tag.PUSH:
            state.current_id = reader.read_int32()
            if not state.suppress_next:
                get_record(records, state.current_id).add_instance(state.current_size)
            state.suppress_next = False

        elif tag == Tag.POP:
            state.suppress_next = True

        else:
            raise MalformedTagError(tag, offset=tag_offset)

        state.events[Tag(tag).name] += 1

    logger.debug(
        f"Decoded {sum(state.events.values())} events ({dict(state.events)}) "
        f"over {reader.offset} bytes into {len(records)} classes"
    )
    return records


def decode_file(path: Union[str, Path], encoding: str = "utf-8") -> RecordMap:
    """
    Decode the heap dump at `path`.

    The file is opened for buffered binary reading and closed on every exit
    path, including decode failures.

    Raises:
        OSError: If the file cannot be opened or read
        DecodeError: If the file contents are malformed
    """
    path = Path(path)
    logger.info(f"Reading heap dump from: {path}")
    with open(path, "rb") as f:
        records = decode_stream(f, encoding=encoding)
    logger.info(f"Aggregated {len(records)} classes from {path}")
    return records
