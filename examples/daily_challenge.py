"""Replay a five-shot daily challenge and print a coaching tip after each shot."""
from py_sharpshooter import *

basicConfig(engine_config={'cTimeStep': 0.001})

weapon = Weapon('sniper', muzzle_velocity_mps=820, drag_factor=0.00018, precision_moa=0.75,
                recoil_pattern_id='sniper-bolt', name='Bolt Action .308')
ammo = Ammo('Match', muzzle_velocity_scale=1.03, dispersion_scale=0.8)
params = compute_final_shot_params(weapon, ammo, 'realistic')
print(f"{weapon.name} / {ammo.name}: {format_ammo_summary(ammo)}")

conditions = get_environment_preset('mountain-summit')
env = Environment(temperature_c=conditions.temperature_c, altitude_m=conditions.altitude_m,
                  wind_profile=(WindSegment(0, 200, 2.0, 0.5), WindSegment(200, 600, 4.0, 1.0)),
                  seed='daily-2026-10-18')
print(f"Conditions: {format_environment_summary(conditions)}, density {env.density:.3f} kg/m³")

flags = wind_at_flag_positions(450, env)
print(f"Flags: near {flags.near.wind_speed:+.1f}, mid {flags.mid.wind_speed:+.1f}, "
      f"far {flags.far.wind_speed:+.1f} m/s")

calc = Calculator(engine='rk4_engine')
turret = TurretState()
recoil = RecoilState(0.0, 0.0, 4.0)
for shot_index in range(5):
    sway = sway_offset(1.3 + shot_index * 2.1, 'realistic', 'sniper', magnification=8)
    aim = combine(sway, recoil.advance(2.0).offset)
    shot = Shot(ShotRequest(distance_m=450, muzzle_velocity_mps=params.muzzle_velocity_mps,
                            drag_factor=params.drag_factor),
                precision_moa=params.precision_moa, seed=env.seed, shot_index=shot_index,
                turret=TurretState(turret.elevation_mils, turret.windage_mils),
                aim_offset_mils=(aim.y, aim.z), spin_drift=True)
    hit = calc.fire(shot, env)
    tip = calc.recommend(hit)
    print(f"#{shot_index + 1} [{turret}] impact y={hit.impact_y_m:+.3f} m z={hit.impact_z_m:+.3f} m "
          f"{'HIT' if hit.is_hit(0.15) else 'miss'} -> dial {tip.elevation_clicks:+d} / {tip.windage_clicks:+d} clicks")
    turret.elevation_mils = quantize_to_click(turret.elevation_mils + tip.elevation_mils)
    turret.windage_mils = quantize_to_click(turret.windage_mils + tip.windage_mils)
    recoil = recoil_impulse('realistic', 'sniper', params.recoil_impulse_mils)
