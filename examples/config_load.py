import os

from py_sharpshooter import basicConfig, DEFAULT_BASE_ENGINE_CONFIG

config_file = os.path.join(os.path.dirname(__file__), '.pyss.toml')
basicConfig(config_file)

print("Engine defaults:")
print(DEFAULT_BASE_ENGINE_CONFIG)
