from __future__ import annotations
from pydantic import BaseModel
import yaml

class ScoringCfg(BaseModel):
    terminal_points: int = 1
    claim_points: int = 10
    possession_points: int = 3
    circuit_points: int = 20

class ParkingCfg(BaseModel):
    signal_zone_points: int = 10      # doubled with a signal sleeve
    off_zone_points: int = 2
    endgame_terminal_points: int = 4  # whole roster parked in a terminal

class FullConfig(BaseModel):
    scoring: ScoringCfg = ScoringCfg()
    parking: ParkingCfg = ParkingCfg()

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
