# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import json
import sys


def main():
    from shared_types.cli.util import add_format_argument, create_parser, import_shape
    from shared_types.codec import deserialize
    from shared_types.serialization import DeserializationError
    from shared_types.serialization.formats import get_wire_format

    parser = create_parser()
    parser.add_argument('shape', help='Shape of the value, as module:name')
    parser.add_argument('data', nargs='?', help='Encoded value in hex, read from stdin when missing')
    parser.add_argument('--indent', type=int, default=None, help='Indent the JSON output')
    add_format_argument(parser)
    args = parser.parse_args()

    wire_type = import_shape(args.shape)
    raw_data = args.data if args.data is not None else sys.stdin.read()

    try:
        data = bytes.fromhex(raw_data.strip())
    except ValueError:
        print('invalid hex input', file=sys.stderr)
        return 1

    try:
        value = deserialize(data, wire_type, fmt=get_wire_format(args.format))
    except DeserializationError as e:
        print(f'{type(e).__name__}: {e}', file=sys.stderr)
        return 1

    print(json.dumps(wire_type.value_to_json(value), indent=args.indent))
    return 0
