from ftcscore.config import FullConfig, ScoringCfg, load_config
from ftcscore.field.junctions import Junction
from ftcscore.rules.fsm import AutoMatch
from ftcscore.state import RED_CAPTAIN, SignalZone


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    cfg = load_config(str(p))
    assert cfg == FullConfig()
    assert cfg.scoring.circuit_points == 20
    assert cfg.parking.signal_zone_points == 10


def test_partial_override(tmp_path):
    p = tmp_path / "scoring.yaml"
    p.write_text("scoring:\n  claim_points: 12\nparking:\n  off_zone_points: 1\n")
    cfg = load_config(str(p))
    assert cfg.scoring.claim_points == 12
    assert cfg.scoring.possession_points == 3
    assert cfg.parking.off_zone_points == 1


def test_config_flows_into_scoring():
    cfg = FullConfig(scoring=ScoringCfg(claim_points=12))
    end = AutoMatch.create([1, 2], [3, 4], SignalZone.LEFT, cfg).into_teleop().into_end_game()
    end.cap_for(RED_CAPTAIN, Junction.X3)
    red, _ = end.end_match()
    assert red.endgame_points == 12
