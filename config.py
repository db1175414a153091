from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, field_validator, Field

from paths import PIPELINE_CONFIG_FILE


class Probe(BaseModel):
    fft_len: int = Field(ge=4, le=16384)
    log_n: int = Field(ge=2, le=14)
    direction: Literal["forward", "inverse"]
    iterations: int = Field(gt=0)
    seed: int
    sample_max: int = Field(gt=0)

    @field_validator('fft_len')
    @classmethod
    def validate_fft_len(cls, v):
        if v & (v - 1):
            raise ValueError(f'fft_len must be a power of 2, got {v}')
        return v

    @field_validator('log_n')
    @classmethod
    def validate_log_n(cls, v, values):
        fft_len = values.data.get('fft_len')
        if fft_len is not None and (1 << v) != fft_len:
            raise ValueError(f'log_n must be log2(fft_len) = {fft_len.bit_length() - 1}')
        return v


class Logging(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class Config(BaseModel):
    probe: Probe
    logging: Logging = Logging()


def load_config(config_file: Path = PIPELINE_CONFIG_FILE) -> Config:
    with config_file.open("r") as file:
        yaml_data = yaml.safe_load(file)
    return Config(**yaml_data)
