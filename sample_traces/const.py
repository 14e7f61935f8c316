# Unless explicitly stated otherwise all files in this repository are licensed under the the Apache License Version 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2021 Datadog, Inc.

# Jaeger service name used when no sample is given
DEFAULT_SAMPLE = "none"

# fallback for the --sample option
SAMPLE_ENV_VAR = "SYSTEM_TESTS_SAMPLE"
