"""protoc plugin entry point (``protoc-gen-slate``).

Usage::

    protoc --slate_out=docs --slate_opt='languages=ruby;protobuf,index_path=index.md' \
        -I schemas schemas/shop/v1/*.proto
"""

from __future__ import annotations

import sys
from typing import BinaryIO

from google.protobuf.compiler import plugin_pb2

from .config import parse_parameter
from .errors import SlateError
from .generator import generate
from .log import configure_logging, get_logger
from .schema import build_packages, parse_request

LOGGER = get_logger("plugin")


def run(request: plugin_pb2.CodeGeneratorRequest) -> plugin_pb2.CodeGeneratorResponse:
    """Answer a code generator *request*.

    Errors are reported through the response ``error`` field, without any
    generated file.
    """
    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL
    try:
        options = parse_parameter(request.parameter)
        packages = build_packages(request.proto_file, list(request.file_to_generate))
        documents = generate(packages, options)
    except SlateError as err:
        LOGGER.error("%s", err)
        response.error = str(err)
        return response

    for document in documents:
        response.file.add(name=document.path, content=document.text)
    return response


def main(stdin: BinaryIO | None = None, stdout: BinaryIO | None = None) -> int:
    """Read a request from *stdin* and write the response to *stdout*."""
    configure_logging()
    source = stdin if stdin is not None else sys.stdin.buffer
    sink = stdout if stdout is not None else sys.stdout.buffer

    try:
        request = parse_request(source.read())
    except SlateError as err:
        LOGGER.error("%s", err)
        response = plugin_pb2.CodeGeneratorResponse(error=str(err))
    else:
        response = run(request)

    sink.write(response.SerializeToString())
    sink.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover - plugin entry point
    raise SystemExit(main())
