"""
Simulation tuning knobs.
"""

# Grid + population
GRID_SIZE = 100
N_INITIAL_ENTITIES = 100
N_MAX_ENTITIES = 500

# Genome / controller shape
GENOME_LEN = 20
MAX_GENOME_LEN = 120
GENE_INDEX_RANGE = 256  # raw gene endpoints; reduced modulo node counts on decode
N_HIDDEN = 5
ACTION_THRESHOLD = 0.2  # below this the organism idles

# Energy + life
INITIAL_ENERGY = 1.0
METABOLISM_COST = 0.01
REPLICATION_COST = 0.2
REPLICATION_THRESHOLD = 0.6
PELLET_ENERGY = 0.1
AVERAGE_LIFESPAN = 300  # ticks
LIFESPAN_SPREAD = 0.25  # std-dev as a fraction of AVERAGE_LIFESPAN

# Mutation
MUT_P = 0.05
INSERT_P = 0.01
MUT_SIGMA = 0.3

# Runtime pacing (seconds)
TICK_INTERVAL = 0.05
SPEED_PRESETS = (0.1, 0.05, 0.025)
EPOCH_INTERVAL = 1.0
MAX_TICKS_PER_FRAME = 4

# Presentation
SCREEN_W, SCREEN_H = 800, 800
FPS = 60
