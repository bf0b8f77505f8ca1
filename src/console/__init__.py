"""Line-oriented console caller for the cohort command core."""
