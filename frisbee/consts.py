# Size of the discrete action space the value table is indexed by:
# idle plus 16 directional/throw combinations.
ACTION_COUNT = 17

# Number of distinct values `GameEngine.state_hash()` can take. Bounds the
# bulk-initialized value table.
MAX_STATE_HASHES = 206909

# Accumulated path cost past which the tree search stops expanding.
SEARCH_COST_BOUND = 10**12

# Ceilings on the tree search so a single decision always terminates.
SEARCH_MAX_DEPTH = 2
SEARCH_MAX_NODES = 5000

DEFAULT_ROLLOUT_SIM = 1
DEFAULT_ROLLOUT_FRAMES = 30
