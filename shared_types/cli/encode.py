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
    from shared_types.codec import serialize
    from shared_types.serialization import SerializationError
    from shared_types.serialization.formats import get_wire_format

    parser = create_parser()
    parser.add_argument('shape', help='Shape of the value, as module:name')
    parser.add_argument('value', nargs='?', help='Value as JSON, read from stdin when missing')
    add_format_argument(parser)
    args = parser.parse_args()

    wire_type = import_shape(args.shape)
    raw_value = args.value if args.value is not None else sys.stdin.read()

    try:
        value = wire_type.json_to_value(json.loads(raw_value))
    except (TypeError, ValueError) as e:
        print(f'invalid value: {e}', file=sys.stderr)
        return 1

    try:
        data = serialize(value, wire_type, fmt=get_wire_format(args.format))
    except SerializationError as e:
        print(f'{type(e).__name__}: {e}', file=sys.stderr)
        return 1
    print(data.hex())
    return 0
