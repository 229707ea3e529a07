from __future__ import annotations

# generation defaults
DEFAULT_PACKAGE_NAME = "bindings"
DEFAULT_TEMPLATE     = "events.go.j2"
STDOUT               = "-"

# go import paths
GO_ETHEREUM_COMMON = "github.com/ethereum/go-ethereum/common"
GO_MATH_BIG        = "math/big"
GO_TIME            = "time"

# types declared by the eventdata wrapper
EVENTDATA_TYPES = ("Block", "LogInfo", "Data")
