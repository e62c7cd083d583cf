import pytest

from py_sharpshooter.exceptions import UnknownPresetError
from py_sharpshooter.munition import (
    REALISM_PRESETS,
    WEAPON_TYPES,
    Ammo,
    FinalShotParams,
    Weapon,
    check_preset,
    check_weapon_type,
    compute_final_shot_params,
    format_ammo_summary,
)


@pytest.fixture
def rifle() -> Weapon:
    return Weapon('rifle', muzzle_velocity_mps=850.0, drag_factor=0.0002, precision_moa=1.0,
                  recoil_pattern_id='rifle-standard', name='Service Rifle')


class TestPresets:

    def test_names(self):
        assert REALISM_PRESETS == ('arcade', 'realistic', 'expert')
        assert WEAPON_TYPES == ('pistol', 'rifle', 'sniper', 'shotgun')
        assert check_preset('expert') == 'expert'
        assert check_weapon_type('sniper') == 'sniper'

    def test_unknown(self):
        with pytest.raises(UnknownPresetError) as exc_info:
            check_preset('nightmare')
        assert exc_info.value.value == 'nightmare'
        assert exc_info.value.allowed == REALISM_PRESETS
        with pytest.raises(UnknownPresetError):
            check_weapon_type('crossbow')

    def test_weapon_validates_type(self):
        with pytest.raises(UnknownPresetError):
            Weapon('crossbow', 100.0, 0.001, 2.0)  # type: ignore[arg-type]


class TestFinalShotParams:

    def test_neutral_ammo(self, rifle):
        params = compute_final_shot_params(rifle, None, 'realistic')
        assert isinstance(params, FinalShotParams)
        assert params.muzzle_velocity_mps == 850.0
        assert params.drag_factor == 0.0002
        assert params.precision_moa == 1.0
        assert params.dispersion_group_size_m == pytest.approx(91.44 / 60)
        assert params.recoil_impulse_mils == 3.0
        assert compute_final_shot_params(rifle, Ammo(), 'realistic') == params

    @pytest.mark.parametrize("preset, drag_scale, recoil_scale", [
        ('arcade', 0.5, 0.5),
        ('realistic', 1.0, 1.0),
        ('expert', 1.2, 1.3),
    ])
    def test_preset_scales(self, rifle, preset, drag_scale, recoil_scale):
        params = compute_final_shot_params(rifle, None, preset)
        assert params.drag_factor == pytest.approx(0.0002 * drag_scale)
        assert params.recoil_impulse_mils == pytest.approx(3.0 * recoil_scale)

    def test_ammo_scales(self, rifle):
        match_ammo = Ammo('Match', muzzle_velocity_scale=1.05, drag_scale=0.9,
                          dispersion_scale=0.5, recoil_scale=1.1)
        params = compute_final_shot_params(rifle, match_ammo, 'realistic')
        assert params.muzzle_velocity_mps == pytest.approx(892.5)
        assert params.drag_factor == pytest.approx(0.00018)
        assert params.precision_moa == pytest.approx(0.5)
        assert params.recoil_impulse_mils == pytest.approx(3.3)

    def test_unknown_preset(self, rifle):
        with pytest.raises(UnknownPresetError):
            compute_final_shot_params(rifle, None, 'easy')  # type: ignore[arg-type]


class TestAmmoSummary:

    @pytest.mark.parametrize("ammo, expected", [
        (Ammo(muzzle_velocity_scale=1.05, dispersion_scale=0.8), "Vel: + 105%, Dispersion: ↑"),
        (Ammo(muzzle_velocity_scale=0.9, dispersion_scale=1.2), "Vel: − 90%, Dispersion: ↓"),
        (Ammo(), "Vel: = 100%, Dispersion: ="),
    ])
    def test_summary(self, ammo, expected):
        assert format_ammo_summary(ammo) == expected
