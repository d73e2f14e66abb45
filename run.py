from model import Model, ProjectileProfile, SpringProfile

def spring_predictor(profile: SpringProfile, dt, frames, logging: bool = False):
    result = []
    Model(dt, [profile], result).simulate(frames, logging)
    return result[0]

def projectile_predictor(profile: ProjectileProfile, dt, frames, logging: bool = False):
    result = []
    Model(dt, [profile], result).simulate(frames, logging)
    return result[0]
