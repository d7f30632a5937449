import pytest

SAMPLE_DOCUMENT = r"""\documentclass[11pt]{article}
\usepackage{amsmath}
\usepackage[margin=1in]{geometry}
\title{On \textbf{Things}}
\author{Ann \and Bob}
\date{2024}
\begin{document}
\maketitle
\begin{abstract}
Short summary.
\end{abstract}

\section{Introduction}\label{sec:intro}
We study $f(x) = x^2$ and cite~\cite{knuth}. % a stray comment
See Section~\ref{sec:intro}.

\begin{equation}
  \int_0^1 f(x)\,dx = \frac{1}{3}
\end{equation}

\subsection*{Items}
\begin{enumerate}
  \item First with \textit{style}
  \item Second\footnote{note}
\end{enumerate}

\begin{figure}[h]
  \centering
  \includegraphics[width=\linewidth]{figures/plot.png}
  \caption{A plot of $f$.}
\end{figure}

\includegraphics{img/logo.png}

\begin{table}
\begin{tabular}{cc}
1 & 2 \\
\end{tabular}
\end{table}

\begin{verbatim}
print("hi")
\end{verbatim}

Prices went up 10\% --- sadly. \mystery{gone} Done.
\end{document}
"""


@pytest.fixture(scope="session")
def sample_document():
    return SAMPLE_DOCUMENT


@pytest.fixture
def html_dir(tmp_path):
    path = tmp_path / "html_output"
    path.mkdir()
    return path


@pytest.fixture
def tex_file(tmp_path, sample_document):
    path = tmp_path / "paper.tex"
    path.write_text(sample_document, encoding="utf-8")
    return path
