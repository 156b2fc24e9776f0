# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .protected_controller import ProtectedController

__all__ = ["AuthController", "ProtectedController"]
