# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGe1 = Annotated[int, Field(strict=True, ge=1)]
PositiveAmount = Annotated[float, Field(gt=0)]
DayOfMonth = Annotated[int, Field(strict=True, ge=1, le=28)]
DecimalPlaces = Annotated[int, Field(strict=True, ge=0, le=6)]
