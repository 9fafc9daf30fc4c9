# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import angles, data, model, structural, survey, validate, view

__all__ = [
	"angles",
	"data",
	"model",
	"structural",
	"survey",
	"validate",
	"view",
]
