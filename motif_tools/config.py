"""Default parameters for the motif-finding commands."""

DEFAULT_PARAMS = {
    "randomized_restarts": 1000,
    "gibbs_restarts": 20,
    "max_inner_iterations": 1000,
    "output_separator": "\n",
}
