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

def main():
    from shared_types.cli.util import create_parser
    from shared_types.conf.get_settings import get_global_settings, get_settings_source

    parser = create_parser()
    parser.parse_args()

    settings = get_global_settings()
    print('source:', get_settings_source())
    print(settings.json_dumpb().decode('utf-8'))
    return 0
