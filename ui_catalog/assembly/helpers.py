"""
Helper Bundles
Source files shipped alongside components whose code imports them.
"""

from .models import HelperBundle, HelperFile


SPINNER_TSX = """import React from 'react';
import styles from './Spinner.module.css';

interface SpinnerProps {
  srAnnouncement?: string;
  size?: 'small' | 'medium' | 'large';
}

const Spinner: React.FC<SpinnerProps> = ({
  srAnnouncement = "Loading...",
  size = 'medium'
}) => {
  return (
    <div className={styles.spinner} data-size={size}>
      <div className={styles.circle}></div>
      {srAnnouncement && (
        <span className={styles.srOnly}>{srAnnouncement}</span>
      )}
    </div>
  );
};

Spinner.displayName = 'Spinner';
export default Spinner;"""


SPINNER_CSS = """.spinner {
  display: inline-flex;
  align-items: center;
  justify-content: center;
}

.circle {
  width: 16px;
  height: 16px;
  border: 2px solid transparent;
  border-top: 2px solid currentColor;
  border-radius: 50%;
  animation: spin 1s linear infinite;
}

.spinner[data-size="small"] .circle {
  width: 12px;
  height: 12px;
  border-width: 1.5px;
}

.spinner[data-size="large"] .circle {
  width: 20px;
  height: 20px;
  border-width: 2.5px;
}

.srOnly {
  position: absolute;
  width: 1px;
  height: 1px;
  padding: 0;
  margin: -1px;
  overflow: hidden;
  clip: rect(0, 0, 0, 0);
  white-space: nowrap;
  border: 0;
}

@keyframes spin {
  0% { transform: rotate(0deg); }
  100% { transform: rotate(360deg); }
}"""


SPINNER = HelperBundle(
    name="Spinner",
    description="Loading spinner component for buttons and other loading states",
    files=(
        HelperFile(path="components/Spinner/Spinner.tsx", content=SPINNER_TSX),
        HelperFile(path="components/Spinner/Spinner.module.css", content=SPINNER_CSS),
    ),
)
