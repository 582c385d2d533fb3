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

import os
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from shared_types import conf
from shared_types.conf.settings import SerdeSettings as Settings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'SHARED_TYPES_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    """
    Returns the settings, loading them the first time.

    The settings come from the yaml file in the 'SHARED_TYPES_CONFIG_YAML' env var, or from the bundled default.yml
    when it isn't set.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, conf.DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    _settings_singleton = _SettingsMetadata(
        source=source,
        settings=load_yaml_settings(source),
    )

    return _settings_singleton.settings


def load_yaml_settings(filepath: str) -> Settings:
    """
    Load the settings from a yaml file and return a validated instance.

    The file may use the `extends` key to merge its definitions over another file, `default.yml` is found from any
    location.
    """
    from shared_types.utils.yaml import model_from_extended_yaml
    logger.debug('loading settings', filepath=filepath)
    return model_from_extended_yaml(Settings, filepath=filepath, custom_root=Path(conf.__file__).parent)
