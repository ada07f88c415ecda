"""Literal Redux Toolkit source files written into the target project.

Each artifact has a TypeScript and a JavaScript body.  The bodies are fixed
text: nothing in them depends on the target project.
"""

from __future__ import annotations

from state_up.models import Language


# ---------------------------------------------------------------------------
# store
# ---------------------------------------------------------------------------

TS_STORE = """\
import { configureStore } from '@reduxjs/toolkit';
import counterReducer from './counterSlice';

export const store = configureStore({
  reducer: {
    counter: counterReducer,
  },
});

export type RootState = ReturnType<typeof store.getState>;
export type AppDispatch = typeof store.dispatch;
"""

JS_STORE = """\
import { configureStore } from '@reduxjs/toolkit';
import counterReducer from './counterSlice';

export const store = configureStore({
  reducer: {
    counter: counterReducer,
  },
});
"""


# ---------------------------------------------------------------------------
# counterSlice
# ---------------------------------------------------------------------------

TS_COUNTER_SLICE = """\
import { createSlice, PayloadAction } from '@reduxjs/toolkit';

interface CounterState {
  value: number;
}

const initialState: CounterState = {
  value: 0,
};

export const counterSlice = createSlice({
  name: 'counter',
  initialState,
  reducers: {
    increment: (state) => {
      state.value += 1;
    },
    decrement: (state) => {
      state.value -= 1;
    },
    incrementByAmount: (state, action: PayloadAction<number>) => {
      state.value += action.payload;
    },
  },
});

export const { increment, decrement, incrementByAmount } = counterSlice.actions;
export default counterSlice.reducer;
"""

JS_COUNTER_SLICE = """\
import { createSlice } from '@reduxjs/toolkit';

const initialState = {
  value: 0,
};

export const counterSlice = createSlice({
  name: 'counter',
  initialState,
  reducers: {
    increment: (state) => {
      state.value += 1;
    },
    decrement: (state) => {
      state.value -= 1;
    },
    incrementByAmount: (state, action) => {
      state.value += action.payload;
    },
  },
});

export const { increment, decrement, incrementByAmount } = counterSlice.actions;
export default counterSlice.reducer;
"""


# ---------------------------------------------------------------------------
# hooks
# ---------------------------------------------------------------------------

TS_HOOKS = """\
import { useDispatch, useSelector } from 'react-redux';
import type { TypedUseSelectorHook } from 'react-redux';
import type { RootState, AppDispatch } from './store';

export const useAppDispatch: () => AppDispatch = useDispatch;
export const useAppSelector: TypedUseSelectorHook<RootState> = useSelector;
"""

JS_HOOKS = """\
import { useDispatch, useSelector } from 'react-redux';

export const useAppDispatch = useDispatch;
export const useAppSelector = useSelector;
"""


# ---------------------------------------------------------------------------
# provider
# ---------------------------------------------------------------------------

TS_PROVIDER = """\
import { Provider } from 'react-redux';
import { store } from './store';
import React from 'react';

interface Props {
  children: React.ReactNode;
}

export function ReduxProvider({ children }: Props) {
  return <Provider store={store}>{children}</Provider>;
}
"""

JS_PROVIDER = """\
import { Provider } from 'react-redux';
import { store } from './store';
import React from 'react';

export function ReduxProvider({ children }) {
  return <Provider store={store}>{children}</Provider>;
}
"""


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

# (file stem, contains JSX) in write order.
ARTIFACTS: tuple[tuple[str, bool], ...] = (
    ("store", False),
    ("counterSlice", False),
    ("hooks", False),
    ("provider", True),
)

TEMPLATES: dict[Language, dict[str, str]] = {
    Language.TYPESCRIPT: {
        "store": TS_STORE,
        "counterSlice": TS_COUNTER_SLICE,
        "hooks": TS_HOOKS,
        "provider": TS_PROVIDER,
    },
    Language.JAVASCRIPT: {
        "store": JS_STORE,
        "counterSlice": JS_COUNTER_SLICE,
        "hooks": JS_HOOKS,
        "provider": JS_PROVIDER,
    },
}


def render_templates(language: Language) -> dict[str, str]:
    """Return ``{filename: content}`` for every artifact in *language*.

    The provider always gets the component extension (``.tsx`` / ``.jsx``)
    because it contains JSX.
    """
    bodies = TEMPLATES[language]
    files: dict[str, str] = {}
    for stem, has_jsx in ARTIFACTS:
        extension = language.component_extension if has_jsx else language.extension
        files[f"{stem}{extension}"] = bodies[stem]
    return files
